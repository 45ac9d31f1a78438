from __future__ import annotations

import os

from PIL import Image, ImageOps

IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".bmp"}


def load_image(path: str) -> Image.Image:
    with Image.open(path) as img:
        img = ImageOps.exif_transpose(img)
        return img.copy()


def normalize_image(img: Image.Image) -> Image.Image:
    if img.mode != "RGBA":
        return img.convert("RGBA")
    return img


def save_image(img: Image.Image, path: str) -> None:
    ext = os.path.splitext(path)[1].lower()
    # JPEG and BMP writers in Pillow have no alpha channel.
    if ext in (".jpg", ".jpeg", ".bmp") and img.mode == "RGBA":
        img = img.convert("RGB")
    img.save(path)
