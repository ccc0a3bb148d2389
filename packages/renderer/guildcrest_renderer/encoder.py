"""PNG serialization of finished surfaces."""

from __future__ import annotations

from io import BytesIO

from .models import ImageBuffer
from .surface import Surface


def encode(surface: Surface) -> ImageBuffer:
    image = surface.to_image()
    buf = BytesIO()
    image.save(buf, format="PNG")
    return ImageBuffer(data=buf.getvalue(), width=image.width, height=image.height, mime_type="image/png")
