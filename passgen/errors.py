# PassgenError and friends
# (error taxonomy)
#


class PassgenError(Exception):
    pass


class RangeError(PassgenError, ValueError):

    def __init__(self, msg):
        ValueError.__init__(self, msg)


class EntropyError(PassgenError):

    def __init__(self, cause):
        self.cause = cause
        PassgenError.__init__(self, f"secure random source failed: {cause}")


class InvalidWordCount(PassgenError, ValueError):

    def __init__(self, word_count: int):
        self.word_count = word_count
        ValueError.__init__(self, f"number of words must be greater than 0 (got {word_count})")


class LengthOutOfRange(PassgenError, ValueError):

    """Requested length can't be reached with given number of words."""

    def __init__(self, target_length: int, word_count: int, min_length: int, max_length: int):
        self.target_length = target_length
        self.word_count = word_count
        self.min_length = min_length
        self.max_length = max_length
        if target_length < min_length:
            msg = (f"requested length {target_length} is too short for {word_count} words "
                   f"(minimum length is {min_length})")
        else:
            msg = (f"requested length {target_length} is too long for {word_count} words "
                   f"(maximum length is {max_length})")
        ValueError.__init__(self, msg)


class NoCombinationFound(PassgenError):

    def __init__(self, target_length: int):
        self.target_length = target_length
        PassgenError.__init__(
            self, f"could not find a valid combination of words for length {target_length}")


class CatalogLoadError(PassgenError):

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        PassgenError.__init__(self, f"error loading words from {str(path)!r}: {reason}")


class ConfigError(PassgenError):
    pass
