"""
Yes/No prompts for destructive actions, each of which the user can silence
until the application exits.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from PyQt5.QtWidgets import QCheckBox, QMessageBox, QWidget


class PromptKind(Enum):
    DISCARD_ANNOTATIONS = "discard_annotations"


@dataclass(frozen=True)
class PromptText:
    title: str
    message: str


PROMPT_TEXTS: Dict[PromptKind, PromptText] = {
    PromptKind.DISCARD_ANNOTATIONS: PromptText(
        "Discard Annotations",
        "Annotations on the current document will be discarded. Continue?",
    ),
}


class ConfirmationPrompts:
    """
    Asks before destructive actions.

    When a prompt is silenced, later calls return the answer given at the
    time it was silenced without showing a dialog.
    """

    def __init__(self):
        self._remembered: Dict[PromptKind, bool] = {}

    def is_silenced(self, kind: PromptKind) -> bool:
        return kind in self._remembered

    def silence(self, kind: PromptKind, answer: bool = True) -> None:
        self._remembered[kind] = answer

    def confirm(self, parent: Optional[QWidget], kind: PromptKind) -> bool:
        """
        Ask the user to confirm an action of the given kind.

        Returns:
            True if the action should go ahead
        """
        if self.is_silenced(kind):
            return self._remembered[kind]

        text = PROMPT_TEXTS[kind]
        box = QMessageBox(QMessageBox.Question, text.title, text.message,
                          QMessageBox.Yes | QMessageBox.No, parent)
        box.setDefaultButton(QMessageBox.No)
        remember = QCheckBox("Don't ask again this session", box)
        box.setCheckBox(remember)

        answer = box.exec_() == QMessageBox.Yes
        if remember.isChecked():
            self.silence(kind, answer)
        return answer


confirmation_prompts = ConfirmationPrompts()
