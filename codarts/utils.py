def strkey(raw: bytes) -> str:
    '''Printable version of a four characters code.'''
    return ''.join(chr(_) if 0x20 <= _ < 0x7f else '.' for _ in bytes(raw))


def hexdump(data: bytes, width: int = 8) -> str:
    '''Rows of hexadecimal values followed by their printable characters.'''
    data = bytes(data)
    rows = []
    for offset in range(0, len(data), width):
        chunk = data[offset:offset + width]
        hexes = ' '.join('%02x' % _ for _ in chunk)
        rows.append('%08x  %-*s  %s' % (offset, width * 3 - 1, hexes, strkey(chunk)))

    return '\n'.join(rows)
