# libsodium CSPRNG (randombytes_buf)

import nacl.utils


randombytes = nacl.utils.random
