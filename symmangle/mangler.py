# Copyright (C) 2019 Björn Lindqvist <bjourne@gmail.com>
#
# Names and name mangling for assembler and object file symbols.
from string import ascii_letters, digits
from threading import RLock
from weakref import ref

# Prefix kinds
DEFAULT = 'default'
PRIVATE = 'private'
LINKER_PRIVATE = 'linker-private'

ASM_SAFE = ascii_letters + digits + '_$.'
DIGITS = frozenset(digits.encode('ascii'))

# A name starting with this byte is emitted without any prefix.
NO_PREFIX_MARKER = 1

class InvalidInput(Exception):
    def __init__(self, message, name):
        super().__init__(message)
        self.name = name

def to_bytes(name):
    if isinstance(name, str):
        try:
            return name.encode('utf-8', 'surrogateescape')
        except UnicodeEncodeError:
            # Lone surrogates that don't stand for an undecodable byte.
            return name.encode('utf-8', 'surrogatepass')
    return bytes(name)

def from_bytes(data):
    return data.decode('utf-8', 'surrogateescape')

def escape_byte(b):
    return '_%02X_' % b

class Mangler:
    """Turns global symbol names into names that are legal in
    assembler and object files.

    In unquoted mode every byte outside the acceptable set is written
    as `_XY_`, XY being its value in uppercase hex. In quoted mode
    names are passed through untouched when possible and otherwise
    wrapped in double quotes."""
    def __init__(self, prefix = '', private_prefix = '',
                 linker_private_prefix = '',
                 use_quotes = False,
                 extra_acceptable = ''):
        self.prefix = prefix
        self.private_prefix = private_prefix
        self.linker_private_prefix = linker_private_prefix
        self.use_quotes = use_quotes
        if not extra_acceptable.isascii():
            fmt = 'Extra acceptable characters must be ASCII, got `%s`!'
            raise ValueError(fmt % extra_acceptable)
        self.acceptable = frozenset(to_bytes(ASM_SAFE + extra_acceptable))

        # Ids for unnamed symbols
        self.anon_ids = {}
        self.next_anon_id = 1
        self.anon_lock = RLock()

    def is_char_acceptable(self, b):
        return b in self.acceptable

    def prefix_for(self, prefix_kind):
        if prefix_kind == DEFAULT:
            return self.prefix
        elif prefix_kind == PRIVATE:
            return self.private_prefix + self.prefix
        elif prefix_kind == LINKER_PRIVATE:
            return self.linker_private_prefix + self.prefix
        raise ValueError('Unknown prefix kind `%s`!' % prefix_kind)

    def escape(self, body):
        parts = []
        for i, b in enumerate(body):
            # Names may not start with a digit.
            if (i == 0 and b in DIGITS) or not self.is_char_acceptable(b):
                parts.append(escape_byte(b))
            else:
                parts.append(chr(b))
        return ''.join(parts)

    def needs_quotes(self, body):
        if body[0] in DIGITS:
            return True
        return not all(self.is_char_acceptable(b) for b in body)

    def quote(self, body):
        body = body.replace(b'"', b'_QQ_').replace(b'\n', b'_NL_')
        return from_bytes(body)

    def mangle_name(self, name, prefix_kind = DEFAULT):
        """Mangles `name`, which must be non-empty. If it starts with
        the byte 1, the marker is dropped and no prefix is added."""
        data = to_bytes(name)
        if not data:
            raise InvalidInput('Cannot mangle an empty name.', name)
        prefix = self.prefix_for(prefix_kind)
        if data[0] == NO_PREFIX_MARKER:
            prefix = ''
            data = data[1:]
            if not data:
                fmt = 'The name %r is empty after the no-prefix marker.'
                raise InvalidInput(fmt % name, name)

        if not self.use_quotes:
            return prefix + self.escape(data)
        if not self.needs_quotes(data):
            return prefix + from_bytes(data)
        return '"%s%s"' % (prefix, self.quote(data))

    def forget(self, key, symbol_ref):
        with self.anon_lock:
            entry = self.anon_ids.get(key)
            if entry is not None and entry[0] is symbol_ref:
                del self.anon_ids[key]

    def anon_id(self, symbol):
        """Returns the id of an unnamed symbol, assigning the next free
        one on first request.

        Symbols are told apart by identity, never by equality. The
        table holds weak references so entries go away with their
        symbols; ids are never handed out twice."""
        key = id(symbol)
        with self.anon_lock:
            entry = self.anon_ids.get(key)
            if entry is not None and entry[0]() is symbol:
                return entry[1]
            try:
                symbol_ref = ref(symbol, lambda r: self.forget(key, r))
            except TypeError:
                # Can't be weakly referenced, so it is kept alive.
                symbol_ref = lambda: symbol
            anon_id = self.next_anon_id
            self.anon_ids[key] = symbol_ref, anon_id
            self.next_anon_id += 1
            return anon_id

    def mangle_symbol(self, symbol, suffix = '', force_private = False):
        # Intrinsics are resolved by name by the backend.
        if symbol.is_intrinsic:
            return symbol.name

        if symbol.has_private_linkage() or force_private:
            prefix_kind = PRIVATE
        elif symbol.has_linker_private_linkage():
            prefix_kind = LINKER_PRIVATE
        else:
            prefix_kind = DEFAULT

        if symbol.has_name():
            return self.mangle_name(symbol.name + suffix, prefix_kind)
        name = '__unnamed_%d%s' % (self.anon_id(symbol), suffix)
        return self.mangle_name(name, prefix_kind)
