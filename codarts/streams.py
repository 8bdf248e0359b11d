import io
import logging


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes/file object to
    uniform its properties.

    When reading, the whole data is kept in memory as a memoryview and
    read() returns borrowed slices of it: nothing is copied, so the
    owner of the original buffer must outlive the slices.

    When built from an io.BytesIO the stream is used for writing.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self._type = type(obj)
        self.obj = obj
        self.view = None
        self.position = 0
        self.history = []

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise ValueError('\'%s\' cannot be used as a stream' % self._type.__name__)

        init_method()

    def __repr__(self):
        return '<%s(%s, position=%d)>' % (self.__class__.__name__, self._type.__name__, self.position)

    def __len__(self):
        return len(self.view) if self.view is not None else len(self.obj.getbuffer())

    def init_str(self):
        '''We think this is a path: the whole file is loaded in memory'''
        logger.debug('opening path \'%s\'' % self.obj)
        with open(self.obj, 'rb') as f:
            self.obj = f.read()
        self.view = memoryview(self.obj)

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.view = memoryview(self.obj)

    def init_bytearray(self):
        self.view = memoryview(self.obj)

    def init_memoryview(self):
        self.view = self.obj.cast('B') if self.obj.format != 'B' else self.obj

    def init_BytesIO(self):
        '''We are going to write into it'''
        pass

    @classmethod
    def writer(cls):
        return cls(io.BytesIO())

    def tell(self):
        return self.position if self.view is not None else self.obj.tell()

    def seek(self, offset):
        if not isinstance(offset, int):
            raise ValueError('\'%s\' is the wrong kind of offset to use' % offset.__class__.__name__)

        if self.view is None:
            self.obj.seek(offset)
            return

        self.position = min(max(offset, 0), len(self.view))

    def remaining(self):
        return len(self.view) - self.position

    def read(self, size):
        '''Returns at most size bytes as a view into the underlying buffer'''
        data = self.view[self.position:self.position + size]
        self.position += len(data)

        return data

    def read_all(self):
        return self.read(self.remaining())

    def write(self, data):
        if self.view is not None:
            raise ValueError('this stream is read-only')

        return self.obj.write(data)

    def getvalue(self):
        return self.obj.getvalue()

    # TODO: create contextmanager
    def save(self):
        self.history.append(self.tell())

    def restore(self):
        old_seek = self.history.pop()
        self.seek(old_seek)
