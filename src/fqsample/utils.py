class FastqSampleError(Exception):
    pass


class ConfigError(FastqSampleError):
    pass


class OpenError(FastqSampleError):
    def __init__(self, role, path, reason):
        self.role = role
        self.path = path
        self.reason = reason
        super(OpenError, self).__init__("Could not open %s file %s (%s)" % (role, path, reason))


class ReadError(FastqSampleError):
    def __init__(self, role, path, reason):
        self.role = role
        self.path = path
        self.reason = reason
        super(ReadError, self).__init__("Could not read %s file %s (%s)" % (role, path, reason))


class WriteError(FastqSampleError):
    pass


class TruncatedRecordError(FastqSampleError):
    def __init__(self, n_lines):
        self.n_lines = n_lines
        super(TruncatedRecordError, self).__init__(
            "Truncated FASTQ record: stream ended after %d of 4 lines" % n_lines)


class LineTooLongError(FastqSampleError):
    def __init__(self, length, limit):
        self.length = length
        self.limit = limit
        super(LineTooLongError, self).__init__(
            "FASTQ line of %d bytes exceeds the limit of %d bytes" % (length, limit))


class PairingError(FastqSampleError):
    def __init__(self, count1, count2):
        self.count1 = count1 # records seen in R1
        self.count2 = count2 # records seen in R2
        super(PairingError, self).__init__(
            "Unpaired reads detected - R1 has %d reads, R2 has %d reads" % (count1, count2))


def divide_zero(v1, v2):
    if v2 > 0:
        return v1 / v2
    else:
        return 0


def get_perc(n1, n2):
    return divide_zero(n1 * 100, n2)
