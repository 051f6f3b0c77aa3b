"""QR symbol encoding via the qrcode library, feeding the styled renderer."""

import base64
from enum import Enum

import qrcode
import qrcode.constants
from PIL import Image

from qrstyle.canvas import render
from qrstyle.config import StyleConfig
from qrstyle.errors import InvalidVersion
from qrstyle.logging import audit, get_logger, trace

log = get_logger("generator")


class ECCLevel(Enum):
    L = qrcode.constants.ERROR_CORRECT_L  # 7%
    M = qrcode.constants.ERROR_CORRECT_M  # 15%
    Q = qrcode.constants.ERROR_CORRECT_Q  # 25%
    H = qrcode.constants.ERROR_CORRECT_H  # 30%


ECC_NAMES = {"L": ECCLevel.L, "M": ECCLevel.M, "Q": ECCLevel.Q, "H": ECCLevel.H}


def encode_payload(data: str, base64_encode: bool = False) -> str:
    """Return the text to put in the symbol, base64-encoded if requested."""
    if not base64_encode:
        return data
    return base64.b64encode(data.encode("utf-8")).decode("ascii")


@trace
def get_module_matrix(
    data: str,
    version: int | None = None,
    ecc: str = "M",
) -> list[list[bool]]:
    """Encode *data* and return the raw module matrix (True = dark).

    The matrix has no quiet zone; the renderer adds its own border.

    Args:
        data: The string to encode (URL, text, etc.)
        version: QR version 1-40 (None = smallest that fits)
        ecc: Error correction level: L/M/Q/H

    Raises:
        InvalidVersion: *version* is not in 1-40.
        KeyError: unknown ecc letter.
        qrcode.exceptions.DataOverflowError: data does not fit *version*.
    """
    if version is not None and not 1 <= version <= 40:
        raise InvalidVersion(version)
    ecc_level = ECC_NAMES[ecc.upper()]
    qr = qrcode.QRCode(
        version=version,
        error_correction=ecc_level.value,
        box_size=1,
        border=0,
    )
    qr.add_data(data)
    qr.make(fit=(version is None))

    size = qr.version * 4 + 17
    audit("qr.matrix", logger=log,
          data=data[:80], version=qr.version, size=f"{size}x{size}", ecc=ecc.upper())
    return qr.modules


def check_logo_ecc(config: StyleConfig, ecc: str) -> None:
    """Warn when a logo is combined with an error-correction level too low to survive it."""
    if config.logo is not None and ecc.upper() in ("L", "M"):
        log.warning("Logo covers modules but ECC is %s; use Q or H to keep the code scannable", ecc.upper())


@trace
def generate_styled_qr(
    data: str,
    config: StyleConfig,
    *,
    version: int | None = None,
    ecc: str = "M",
    encode: bool = False,
) -> Image.Image:
    """Encode *data* and render it with *config*."""
    check_logo_ecc(config, ecc)
    matrix = get_module_matrix(encode_payload(data, encode), version=version, ecc=ecc)
    return render(matrix, config)
