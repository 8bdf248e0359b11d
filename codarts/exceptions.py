from .utils import strkey


class TimeSeriesException(Exception):
    '''Base class to extend in order to throw exception in codarts.

    It takes a single argument that represents the chain of the layer that
    caused the exception, e.g. ['HEAD', 'swep', 'sweeprate'].
    '''

    def __init__(self, chain, message=None):
        self.chain = chain
        self.message = message
        super().__init__(message)

    def __str__(self):
        where = '.'.join(str(_) for _ in self.chain)
        if not self.message:
            return where
        if not where:
            return self.message

        return f'{where}: {self.message}'


class UnpackException(TimeSeriesException):
    pass


class MagicException(TimeSeriesException):
    pass


class UnknownBlockException(UnpackException):
    '''The tag is not present in the registry of known blocks.'''

    def __init__(self, tag, chain=None, line=None):
        self.tag = tag
        self.line = line
        message = f"unknown block '{strkey(tag)}'"
        if line is not None:
            message += f' at line {line}'
        super().__init__(chain if chain is not None else [], message)


class TruncatedBlockException(UnpackException):
    pass


class ParameterException(TimeSeriesException):
    '''A text parameter is missing or it's not parsable.'''

    def __init__(self, tag, name, line, reason='cannot find parameter'):
        self.tag = tag
        self.name = name
        self.line = line
        super().__init__([tag], f"{reason} '{name}' in block starting at line {line}")


class SampleCountException(TimeSeriesException):
    pass


class SampleFormatException(TimeSeriesException):
    '''This is raised the first time a sample is processed with a type
    we don't know the fullscale of.'''

    def __init__(self, sample_type, index):
        self.sample_type = sample_type
        self.index = index
        super().__init__(['alvl'], f'unknown sample type {sample_type!r} at index {index}')


class LayoutException(TimeSeriesException):
    '''The blocks are not in the order needed to serialize them.'''
    pass


class MissingMarkerException(LayoutException):
    '''This is useful when is not possible to serialize a tree
    without one of its container markers.'''
    pass
