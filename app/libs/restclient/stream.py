import inspect

from .exceptions import StreamRecordTooLongError
from .models import Body
from .types import StreamCallback

MAX_STREAM_BUFFER_SIZE = 512 * 1024


async def _emit(callback: StreamCallback, record: bytes) -> None:
    if record.endswith(b"\r"):
        record = record[:-1]
    result = callback(record)
    if inspect.isawaitable(result):
        await result


async def stream(
    callback: StreamCallback,
    body: Body,
    max_buffer_size: int = MAX_STREAM_BUFFER_SIZE,
) -> None:
    """Feed a newline-delimited body to ``callback`` one record at a time.

    The delimiter is stripped from every record. A final record without a
    trailing newline is still delivered. Exceptions raised by the callback
    stop the stream and propagate unchanged.
    """
    buffer = bytearray()
    # bytes of the partial record already searched for a delimiter
    scanned = 0

    async for chunk in body.iter_bytes():
        buffer.extend(chunk)
        start = 0
        while (end := buffer.find(b"\n", scanned)) != -1:
            if end - start >= max_buffer_size:
                raise StreamRecordTooLongError(f"record longer than {max_buffer_size} bytes")
            await _emit(callback, bytes(buffer[start:end]))
            start = scanned = end + 1
        del buffer[:start]
        scanned = len(buffer)

        if len(buffer) >= max_buffer_size:
            raise StreamRecordTooLongError(f"record longer than {max_buffer_size} bytes")

    if buffer:
        await _emit(callback, bytes(buffer))
