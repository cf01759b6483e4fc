"""
Mitra POS Backend — QR Code Service
=====================================

What:  Renders text (typically a table or order URL) as a PNG QR code and
       returns it as a `data:image/png;base64,...` URL the frontend can put
       straight into an <img src>.
"""

import base64
import io
import logging

import qrcode

from mitrapos.exceptions import ValidationError

logger = logging.getLogger(__name__)

DATA_URL_PREFIX = "data:image/png;base64,"


class QrCodeService:
    def generate_data_url(self, text: str) -> str:
        """
        Encode `text` as a QR code PNG data URL.

        Blocking (PIL rendering); route handlers run it in the threadpool.

        Raises:
            ValidationError: text is empty
        """
        if not text:
            raise ValidationError(message='Field "qrcode" is required.', field="qrcode")

        image = qrcode.make(text)
        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
        encoded = base64.b64encode(buffer.getvalue()).decode("ascii")

        logger.debug("Generated QR code for %d chars (%d bytes PNG)", len(text), buffer.tell())
        return DATA_URL_PREFIX + encoded


qrcode_service = QrCodeService()
