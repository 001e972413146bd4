from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QColor
from PyQt5.QtWidgets import (
    QColorDialog, QComboBox, QFrame, QHBoxLayout, QLabel, QLineEdit,
    QSizePolicy, QToolButton, QWidget
)

from inkmark.core.drawing import Tool

TOOL_LABELS = [
    (Tool.SELECT, "Select"),
    (Tool.HIGHLIGHT, "Highlight"),
    (Tool.UNDERLINE, "Underline"),
    (Tool.COMMENT, "Comment"),
    (Tool.SIGNATURE, "Signature"),
]


class AnnotationToolbar(QFrame):
    """Tool picker with the parameter editor for the selected tool."""

    tool_selected = pyqtSignal(object)  # Tool
    highlight_color_changed = pyqtSignal(str)
    underline_color_changed = pyqtSignal(str)
    comment_text_changed = pyqtSignal(str)
    signature_clear_requested = pyqtSignal()

    def __init__(self, highlight_color="#ffff00", underline_color="#0000ff", parent=None):
        super().__init__(parent)
        self.setObjectName("AnnotationToolbar")
        self.highlight_color = highlight_color
        self.underline_color = underline_color

        self.setup_ui()
        self._update_parameter_widgets(Tool.SELECT)

    def setup_ui(self):
        self.setSizePolicy(QSizePolicy.Preferred, QSizePolicy.Fixed)

        main_layout = QHBoxLayout(self)
        main_layout.setContentsMargins(12, 6, 12, 6)
        main_layout.setSpacing(8)

        tool_label = QLabel("Tool:", self)
        tool_label.setStyleSheet("font-weight: bold; color: #8899AA;")
        main_layout.addWidget(tool_label)

        self.tool_combo = QComboBox(self)
        for tool, label in TOOL_LABELS:
            self.tool_combo.addItem(label, tool)
        self.tool_combo.currentIndexChanged.connect(self._on_tool_index_changed)
        main_layout.addWidget(self.tool_combo)

        # Highlight color
        self.highlight_panel, self.highlight_color_button = self._make_color_panel(
            "Highlight Color:", self.highlight_color, self._choose_highlight_color
        )
        main_layout.addWidget(self.highlight_panel)

        # Underline color
        self.underline_panel, self.underline_color_button = self._make_color_panel(
            "Underline Color:", self.underline_color, self._choose_underline_color
        )
        main_layout.addWidget(self.underline_panel)

        # Comment text
        self.comment_input = QLineEdit(self)
        self.comment_input.setPlaceholderText("Enter comment")
        self.comment_input.setFixedWidth(220)
        self.comment_input.textChanged.connect(self.comment_text_changed.emit)
        main_layout.addWidget(self.comment_input)

        # Signature hint and reset
        self.signature_panel = QWidget(self)
        signature_layout = QHBoxLayout(self.signature_panel)
        signature_layout.setContentsMargins(0, 0, 0, 0)
        signature_hint = QLabel("Draw on the page; release to place the signature", self.signature_panel)
        signature_hint.setStyleSheet("color: #8899AA; font-size: 11px;")
        signature_layout.addWidget(signature_hint)
        self.clear_signature_button = QToolButton(self.signature_panel)
        self.clear_signature_button.setText("Clear")
        self.clear_signature_button.setToolTip("Erase the signature drawing")
        self.clear_signature_button.clicked.connect(self.signature_clear_requested.emit)
        signature_layout.addWidget(self.clear_signature_button)
        main_layout.addWidget(self.signature_panel)

        main_layout.addStretch()

    def _make_color_panel(self, text, color, on_click):
        panel = QWidget(self)
        layout = QHBoxLayout(panel)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        label = QLabel(text, panel)
        label.setStyleSheet("color: #8899AA;")
        layout.addWidget(label)

        button = QToolButton(panel)
        button.setToolTip("Choose color")
        button.setFixedSize(28, 28)
        button.clicked.connect(on_click)
        self._update_color_button(button, color)
        layout.addWidget(button)
        return panel, button

    def _on_tool_index_changed(self, index):
        tool = self.tool_combo.itemData(index)
        self._update_parameter_widgets(tool)
        self.tool_selected.emit(tool)

    def _update_parameter_widgets(self, tool):
        """Show only the editor for the selected tool."""
        self.highlight_panel.setVisible(tool == Tool.HIGHLIGHT)
        self.underline_panel.setVisible(tool == Tool.UNDERLINE)
        self.comment_input.setVisible(tool == Tool.COMMENT)
        self.signature_panel.setVisible(tool == Tool.SIGNATURE)

    def select_tool(self, tool):
        """Select a tool programmatically."""
        index = self.tool_combo.findData(tool)
        if index >= 0:
            self.tool_combo.setCurrentIndex(index)

    def current_tool(self):
        return self.tool_combo.currentData()

    def set_comment_text(self, text):
        """Update the comment field without re-emitting the change."""
        self.comment_input.blockSignals(True)
        self.comment_input.setText(text)
        self.comment_input.blockSignals(False)

    def _choose_highlight_color(self):
        color = self._pick_color(self.highlight_color, "Choose Highlight Color")
        if color:
            self.highlight_color = color
            self._update_color_button(self.highlight_color_button, color)
            self.highlight_color_changed.emit(color)

    def _choose_underline_color(self):
        color = self._pick_color(self.underline_color, "Choose Underline Color")
        if color:
            self.underline_color = color
            self._update_color_button(self.underline_color_button, color)
            self.underline_color_changed.emit(color)

    def _pick_color(self, current, title):
        """Open color picker dialog. Returns '#rrggbb' or None if cancelled."""
        color = QColorDialog.getColor(QColor(current), self, title)
        if color.isValid():
            return color.name()
        return None

    def _update_color_button(self, button, color):
        """Update a color button to show the given color."""
        button.setStyleSheet(f"""
            QToolButton {{
                background-color: {color};
                border: 2px solid #555555;
                border-radius: 4px;
            }}
            QToolButton:hover {{
                border: 2px solid #777777;
            }}
        """)
