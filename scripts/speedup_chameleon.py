#!/usr/bin/env python3

# Copyright (C) 2021-2022 The chamhash developers
#
# This file is part of chamhash. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of chamhash including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

import random
import time

from chamhash.chameleon import chameleon_hash, find_collision, hash_point_
from chamhash.ecc.curve import mult, secp256r1

random.seed(42)

ec = secp256r1
n_runs = 50

# setup
q = random.randrange(1, ec.n)
Q = mult(q, ec.G, ec)
msgs = []
for _ in range(n_runs):
    msgs.append(random.getrandbits(256).to_bytes(32, "big"))

start = time.time()
tags = [chameleon_hash(msg, Q) for msg in msgs]
elapsed1 = time.time() - start

start = time.time()
for msg, tag in zip(msgs, tags):
    find_collision(msg, tag, b"hello shadowlands!", q)
elapsed2 = time.time() - start

# hash point only, no random sampling
start = time.time()
for msg, tag in zip(msgs, tags):
    hash_point_(msg, tag.R, tag.s, Q, ec)
elapsed3 = time.time() - start

print(f"hash:         {elapsed1 / n_runs * 1000:.2f} ms")
print(f"collision:    {elapsed2 / n_runs * 1000:.2f} ms")
print(f"hash point:   {elapsed3 / n_runs * 1000:.2f} ms")
print(elapsed3 / elapsed1)
