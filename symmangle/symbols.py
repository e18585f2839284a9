# Copyright (C) 2019 Björn Lindqvist <bjourne@gmail.com>
#
# Global symbols of a compilation unit, as seen by the mangler.

# Linkage kinds
EXTERNAL = 'external'
INTERNAL = 'internal'
PRIVATE = 'private'
LINKER_PRIVATE = 'linker-private'
WEAK = 'weak'
COMMON = 'common'
LINKAGES = (EXTERNAL, INTERNAL, PRIVATE, LINKER_PRIVATE, WEAK, COMMON)

INTRINSIC_PREFIX = 'llvm.'

class GlobalSymbol:
    is_intrinsic = False

    def __init__(self, name = None, linkage = EXTERNAL):
        if linkage not in LINKAGES:
            raise ValueError('Unknown linkage `%s`!' % linkage)
        self.name = name
        self.linkage = linkage

    def has_name(self):
        return bool(self.name)

    def has_private_linkage(self):
        return self.linkage == PRIVATE

    def has_linker_private_linkage(self):
        return self.linkage == LINKER_PRIVATE

    def __repr__(self):
        cls_name = self.__class__.__name__
        return '%s(%r, %s)' % (cls_name, self.name, self.linkage)

class Function(GlobalSymbol):
    def __init__(self, name = None, linkage = EXTERNAL, intrinsic = None):
        super().__init__(name, linkage)
        # By default intrinsics are recognized by their name.
        if intrinsic is None:
            intrinsic = bool(name) and name.startswith(INTRINSIC_PREFIX)
        self.is_intrinsic = intrinsic

class Variable(GlobalSymbol):
    def __init__(self, name = None, linkage = EXTERNAL):
        super().__init__(name, linkage)
