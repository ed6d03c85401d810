import gzip
import zlib
import pysam
from fqsample.utils import OpenError, ReadError, WriteError, TruncatedRecordError, LineTooLongError

GZIP_MAGIC = b"\x1f\x8b"
RECORD_LINES = 4 # identifier, sequence, separator, quality


class GzipSource(gzip.GzipFile):
    """
    Gzip reader over an already opened binary handle. Closing it also
    closes the handle.
    """
    def __init__(self, fh):
        super(GzipSource, self).__init__(fileobj=fh, mode="rb")
        self.source = fh

    def close(self):
        try:
            super(GzipSource, self).close()
        finally:
            self.source.close()


class ClosingSink(object):
    """
    Context manager closing an output handle. An OSError raised by close(),
    e.g. a deferred flush on a full disk, is reported as WriteError.
    """
    def __init__(self, fw, role="output"):
        self.fw = fw
        self.role = role

    def __enter__(self):
        return self.fw

    def __exit__(self, exc_type, exc_value, tb):
        try:
            self.fw.close()
        except OSError as e:
            # an error already propagating is reported instead
            if exc_type is None:
                raise WriteError("Failed to close %s file (%s)" % (self.role, e.strerror or str(e))) from e
        return False


def open_input(path, role="input"):
    """
    Open a FASTQ file for reading in binary mode. Gzip input is detected
    from the magic bytes, so the file name does not need a .gz suffix.
    The path is opened only once, so pipes and FIFOs work as input.
    """
    try:
        fh = open(path, "rb")
    except OSError as e:
        raise OpenError(role, path, e.strerror or str(e))
    try:
        magic = fh.peek(2)[:2]
    except OSError as e:
        fh.close()
        raise OpenError(role, path, e.strerror or str(e))
    if magic == GZIP_MAGIC:
        return GzipSource(fh)
    return fh


def open_output(path, compress=False, role="output"):
    """
    Open a FASTQ file for writing in binary mode. With compress=True the
    records are written as BGZF, which every gzip reader accepts.
    """
    try:
        if compress:
            return pysam.BGZFile(path, "wb")
        else:
            return open(path, "wb")
    except OSError as e:
        raise OpenError(role, path, e.strerror or str(e))


def read_line(fh, role):
    try:
        return fh.readline()
    except (OSError, EOFError, zlib.error) as e:
        raise ReadError(role, getattr(fh, "name", None), e)


def read_record(fh, max_line_length=0, role="input"):
    """
    Read the next 4-line record from fh.

    Returns a tuple of 4 byte strings without their trailing newlines, or
    None when fh is exhausted before the first line of a record. A stream
    that ends inside a record raises TruncatedRecordError, and a damaged
    or cut gzip stream raises ReadError. If max_line_length > 0, a longer
    line raises LineTooLongError.
    """
    lines = []
    for i in range(RECORD_LINES):
        line = read_line(fh, role)
        if not line:
            if i == 0:
                return None
            raise TruncatedRecordError(i)
        if line.endswith(b"\n"):
            line = line[:-1]
        if max_line_length > 0 and len(line) > max_line_length:
            raise LineTooLongError(len(line), max_line_length)
        lines.append(line)
    return tuple(lines)


def load_records(fh, max_line_length=0, role="input"):
    while True:
        record = read_record(fh, max_line_length, role)
        if record is None:
            break
        yield record


def format_record(record):
    return b"".join([line + b"\n" for line in record])


def write_record(fw, record):
    try:
        fw.write(format_record(record))
    except OSError as e:
        raise WriteError("Failed to write FASTQ record (%s)" % (e.strerror or str(e)))
