# Copyright (C) 2019 Björn Lindqvist <bjourne@gmail.com>
#
# Mangles the names of global symbols so that they can be emitted in
# assembler and object files. You can try it like this:
#
#     python -m symmangle --prefix _ 3bar 'foo bar'
#
# FAQ
# ===
#
# Why the \x01 marker?
# --------------------
# Names starting with it are emitted as is, without any prefix. Front
# ends use it for symbols whose exact assembler name is already known.
#
# Can names be demangled?
# -----------------------
# No.
from symmangle.mangler import (DEFAULT, LINKER_PRIVATE, PRIVATE,
                               InvalidInput, Mangler)
from symmangle.symbols import Function, GlobalSymbol, Variable
