from __future__ import annotations

import uuid


class MultipartBody:
    """Builds a ``multipart/form-data`` payload part by part.

    The transcription endpoint parses the body strictly, so the CRLF layout
    here is fixed:

        --<boundary>\\r\\n
        Content-Disposition: form-data; name="<field>"\\r\\n\\r\\n
        <value>\\r\\n
        ...
        --<boundary>--\\r\\n
    """

    def __init__(self, boundary: str | None = None):
        self.boundary = boundary or str(uuid.uuid4()).upper()
        self._chunks: list[bytes] = []
        self._closed = False

    @property
    def content_type(self) -> str:
        return f"multipart/form-data; boundary={self.boundary}"

    def add_field(self, name: str, value: str) -> "MultipartBody":
        self._append(f"--{self.boundary}\r\n")
        self._append(f'Content-Disposition: form-data; name="{name}"\r\n\r\n')
        self._append(f"{value}\r\n")
        return self

    def add_file(
        self, name: str, filename: str, mime_type: str, data: bytes
    ) -> "MultipartBody":
        self._append(f"--{self.boundary}\r\n")
        self._append(
            f'Content-Disposition: form-data; name="{name}"; filename="{filename}"\r\n'
        )
        self._append(f"Content-Type: {mime_type}\r\n\r\n")
        self._chunks.append(bytes(data))
        self._append("\r\n")
        return self

    def close(self) -> bytes:
        if not self._closed:
            self._append(f"--{self.boundary}--\r\n")
            self._closed = True
        return b"".join(self._chunks)

    def _append(self, text: str) -> None:
        if self._closed:
            raise ValueError("multipart body already closed")
        self._chunks.append(text.encode("utf-8"))
