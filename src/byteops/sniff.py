# Filename: src/byteops/sniff.py
"""
Identify image files by their leading magic bytes.

Standalone helper; nothing in byteops.ops depends on it.
"""

import logging
import os
from typing import Optional

log = logging.getLogger(__name__)

SIGNATURES: dict[str, bytes] = {
    "png": bytes([137, 80, 78, 71, 13, 10, 26, 10]),
    "jpeg": bytes([255, 216, 255]),
    "gif": bytes([71, 73, 70, 56, 57, 97]),  # GIF89a
    "bmp": bytes([66, 77]),
    "mng": bytes([138, 77, 78, 71, 13, 10, 26, 10]),
    "ppm": bytes([80, 52]),
    "psd": bytes([56, 66, 80, 83]),
}


def has_header(path: str | os.PathLike, signature: bytes) -> bool:
    """
    True if the file at path begins with exactly the bytes of signature.

    Returns False if the file can't be read, or is shorter than the signature.
    """
    try:
        with open(path, "rb") as fp:
            head = fp.read(len(signature))
    except OSError as e:
        log.debug(f"Cannot read header of {os.fsdecode(path)!r}: {e}")
        return False
    return head == bytes(signature)


def detect(path: str | os.PathLike) -> Optional[str]:
    """Name of the first signature the file matches, or None."""
    try:
        with open(path, "rb") as fp:
            head = fp.read(max(len(sig) for sig in SIGNATURES.values()))
    except OSError as e:
        log.debug(f"Cannot read header of {os.fsdecode(path)!r}: {e}")
        return None

    for name, signature in SIGNATURES.items():
        if head.startswith(signature):
            return name
    return None


def is_png(path: str | os.PathLike) -> bool:
    return has_header(path, SIGNATURES["png"])


def is_jpeg(path: str | os.PathLike) -> bool:
    return has_header(path, SIGNATURES["jpeg"])


def is_gif(path: str | os.PathLike) -> bool:
    return has_header(path, SIGNATURES["gif"])


def is_bmp(path: str | os.PathLike) -> bool:
    return has_header(path, SIGNATURES["bmp"])


def is_mng(path: str | os.PathLike) -> bool:
    return has_header(path, SIGNATURES["mng"])


def is_ppm(path: str | os.PathLike) -> bool:
    return has_header(path, SIGNATURES["ppm"])


def is_psd(path: str | os.PathLike) -> bool:
    return has_header(path, SIGNATURES["psd"])
