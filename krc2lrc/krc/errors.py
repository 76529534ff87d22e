class DecodeError(ValueError):
    pass


class MalformedInput(DecodeError):
    pass


class DecompressionError(DecodeError):
    pass


class EncodingError(DecodeError):
    pass


class NotKrcFile(DecodeError):
    pass
