"""
Signature capture surface.
"""
from .canvas import SignatureCanvas, decode_image_payload, encode_image_payload

__all__ = ['SignatureCanvas', 'decode_image_payload', 'encode_image_payload']
