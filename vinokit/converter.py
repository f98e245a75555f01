"""Decode images and resize them into raw tensor bytes."""

from __future__ import annotations

import enum
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class ConversionError(Exception):
    """Raised when an image cannot be converted into a tensor."""


class Precision(enum.Enum):
    """The precision of each pixel value."""

    U8 = "u8"
    FP32 = "fp32"

    @classmethod
    def parse(cls, text: str) -> Precision:
        """Parse a precision name such as ``u8`` or ``FP32``."""
        try:
            return cls(text.lower())
        except ValueError:
            raise ConversionError(f"unrecognized precision: {text}") from None

    def bytes(self) -> int:
        """Return the number of bytes one value occupies."""
        return 1 if self is Precision.U8 else 4

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(np.uint8) if self is Precision.U8 else np.dtype(np.float32)


def _parse_i32(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ConversionError(f"parsing error: invalid digit found in string: {text!r}")
    value = int(text)
    if not _I32_MIN <= value <= _I32_MAX:
        raise ConversionError(f"parsing error: number too large to fit in target type: {text}")
    return value


@dataclass(frozen=True)
class Dimensions:
    """The height, width, channel count and precision of an image."""

    height: int
    width: int
    channels: int
    precision: Precision

    @classmethod
    def parse(cls, text: str) -> Dimensions:
        """Parse ``[height]x[width]x[channels]x[precision]``, e.g. ``300x300x3xfp32``."""
        parts = text.strip().split("x")
        if len(parts) != 4:
            raise ConversionError(
                "Not enough parts in dimension string; should be "
                "[height]x[width]x[channels]x[precision]"
            )
        height, width, channels = (_parse_i32(part) for part in parts[:3])
        return cls(height, width, channels, Precision.parse(parts[3]))

    def bytes(self) -> int:
        """Return the number of bytes an image of these dimensions occupies.

        Raises ValueError if the number of items is negative.
        """
        items = self.height * self.width * self.channels
        if items < 0:
            raise ValueError("overflow in number of items")
        return items * self.precision.bytes()

    def _check_supported(self) -> None:
        if self.channels != 3:
            raise ConversionError(
                f"unsupported combination of precision {self.precision.value} "
                f"and {self.channels} channels"
            )
        if self.height <= 0 or self.width <= 0:
            raise ConversionError(
                f"invalid output size: {self.height}x{self.width}"
            )


def nhwc_to_nchw(data: bytes, dimensions: Dimensions) -> bytes:
    """Reorder image bytes from height-width-channel to channel-height-width order.

    Raises ValueError if the data does not match the dimensions.
    """
    width_bytes = dimensions.precision.bytes()
    if len(data) != dimensions.bytes():
        raise ValueError(
            f"expected {dimensions.bytes()} bytes for {dimensions}, got {len(data)}"
        )
    array = np.frombuffer(data, dtype=np.uint8).reshape(
        dimensions.height, dimensions.width, dimensions.channels, width_bytes
    )
    return array.transpose(2, 0, 1, 3).tobytes()


def _decode_bgr(path: Path) -> Image.Image:
    try:
        with Image.open(path) as image:
            return image.convert("RGB")
    except (UnidentifiedImageError, OSError) as error:
        raise ConversionError(f"unable to decode image {path}: {error}") from error


def convert(path: str | os.PathLike[str], dimensions: Dimensions, layout: str) -> bytes:
    """Decode an image, resize it bilinearly and return its bytes.

    Pixels are in BGR channel order. ``layout`` is ``"nchw"`` or ``"nhwc"``.
    Raises ConversionError if the path is not a file, the image cannot be
    decoded, the dimensions are unsupported or the layout is unknown.
    """
    path = Path(path)
    logger.info("Converting %s to %s", path, dimensions)
    if not path.is_file():
        raise ConversionError("The path is not a valid file.")
    dimensions._check_supported()

    source = _decode_bgr(path)
    logger.info("The input image has size = %s, mode = %s", source.size, source.mode)

    resized = source.resize(
        (dimensions.width, dimensions.height), Image.Resampling.BILINEAR
    )
    pixels = np.asarray(resized, dtype=np.uint8)[:, :, ::-1]
    converted = np.ascontiguousarray(pixels.astype(dimensions.precision.dtype))
    logger.info(
        "After conversion, the image has shape = %s, dtype = %s",
        converted.shape,
        converted.dtype,
    )

    nhwc = converted.tobytes()
    if layout == "nchw":
        return nhwc_to_nchw(nhwc, dimensions)
    if layout == "nhwc":
        return nhwc
    raise ConversionError("Invalid format specified.")