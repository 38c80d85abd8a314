#!/usr/bin/env python3

# Copyright (C) 2021-2022 The chamhash developers
#
# This file is part of chamhash. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of chamhash including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Type aliases shared by the chamhash modules.

Points are plain tuples of field coordinates: (x, y) in affine
coordinates, (X, Y, Z) in Jacobian coordinates.
The point at infinity has no affine coordinates,
so it is represented by any tuple with y == 0 (Z == 0 for Jacobian);
INF and INFJ are the canonical sentinels.
"""

from typing import Any, Callable, Tuple, Union

# bytes, or a hex-string of them
Octets = Union[bytes, str]

# messages: bytes, or text to be UTF-8 encoded
String = Union[bytes, str]

# hashlib constructor, e.g. hashlib.sha256
HashF = Callable[[], Any]

# entropy source: returns exactly the requested number of bytes
RandBytes = Callable[[int], bytes]

Point = Tuple[int, int]
JacPoint = Tuple[int, int, int]

INF: Point = 5, 0
INFJ: JacPoint = 7, 0, 0
