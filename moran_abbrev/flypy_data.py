"""
Static slot-normalization table for full codes.

Maps a raw (initial, final) pair to its canonical flypy pair. Pairs missing
from the table are already canonical. The mapping is one directed step and is
not symmetric: "bz" becomes "bw" but "bw" has no entry.
"""
from __future__ import annotations

from types import MappingProxyType

FLYPY_SLOT_PAIRS = MappingProxyType({
    "bz": "bw",
    "dz": "dw",
    "fz": "fw",
    "gz": "gw",
    "hz": "hw",
    "kz": "kw",
    "lz": "lw",
    "mz": "mw",
    "nz": "nw",
    "pz": "pw",
    "sz": "sw",
    "uz": "uw",
    "tz": "tw",
    "wz": "ww",
    "zz": "zw",
    "vz": "vw",

    "ip": "iy",
    "cp": "cy",
    "dp": "dy",
    "gp": "gy",
    "hp": "hy",
    "jp": "jy",
    "kp": "ky",
    "lp": "ly",
    "np": "ny",
    "qp": "qy",
    "rp": "ry",
    "up": "uy",
    "sp": "sy",
    "tp": "ty",
    "xp": "xy",
    "yp": "yy",
    "vp": "vy",
    "zp": "zy",

    "bx": "bp",
    "dx": "dp",
    "jx": "jp",
    "lx": "lp",
    "mx": "mp",
    "nx": "np",
    "px": "pp",
    "qx": "qp",
    "tx": "tp",
    "xx": "xp",

    "bl": "bd",
    "cl": "cd",
    "il": "id",
    "dl": "dd",
    "gl": "gd",
    "hl": "hd",
    "kl": "kd",
    "ll": "ld",
    "ml": "md",
    "nl": "nd",
    "pl": "pd",
    "sl": "sd",
    "ul": "ud",
    "tl": "td",
    "wl": "wd",
    "zl": "zd",
    "vl": "vd",

    "by": "bk",
    "dy": "dk",
    "jy": "jk",
    "ly": "lk",
    "my": "mk",
    "ny": "nk",
    "py": "pk",
    "qy": "qk",
    "ty": "tk",
    "xy": "xk",
    "yy": "yk",
    "iy": "ik",
    "gy": "gk",
    "hy": "hk",
    "ky": "kk",
    "uy": "uk",
    "vy": "vk",

    "dd": "dl",
    "jd": "jl",
    "ld": "ll",
    "nd": "nl",
    "qd": "ql",
    "xd": "xl",
    "id": "il",
    "gd": "gl",
    "hd": "hl",
    "kd": "kl",
    "ud": "ul",
    "vd": "vl",

    "ib": "iz",
    "cb": "cz",
    "db": "dz",
    "fb": "fz",
    "gb": "gz",
    "hb": "hz",
    "kb": "kz",
    "lb": "lz",
    "mb": "mz",
    "nb": "nz",
    "pb": "pz",
    "rb": "rz",
    "ub": "uz",
    "sb": "sz",
    "tb": "tz",
    "yb": "yz",
    "vb": "vz",
    "zb": "zz",

    "jw": "jx",
    "lw": "lx",
    "nw": "nx",
    "qw": "qx",
    "xw": "xx",
    "iw": "ix",
    "gw": "gx",
    "hw": "hx",
    "kw": "kx",
    "uw": "ux",
    "vw": "vx",

    "bk": "bc",
    "ck": "cc",
    "ik": "ic",
    "dk": "dc",
    "gk": "gc",
    "hk": "hc",
    "kk": "kc",
    "lk": "lc",
    "mk": "mc",
    "nk": "nc",
    "pk": "pc",
    "rk": "rc",
    "sk": "sc",
    "uk": "uc",
    "tk": "tc",
    "yk": "yc",
    "zk": "zc",
    "vk": "vc",

    "bn": "bb",
    "jn": "jb",
    "ln": "lb",
    "mn": "mb",
    "nn": "nb",
    "pn": "pb",
    "qn": "qb",
    "xn": "xb",
    "yn": "yb",

    "bc": "bn",
    "dc": "dn",
    "jc": "jn",
    "lc": "ln",
    "mc": "mn",
    "nc": "nn",
    "pc": "pn",
    "qc": "qn",
    "tc": "tn",
    "xc": "xn",
})
