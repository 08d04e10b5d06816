"""Arithmetic on a masked register file.

Every logical value v lives in a pair of registers (x, y) with reg[x] ^ reg[y] == v.
Register indices wrap modulo the size of the register file. Values are signed
32-bit and results wrap.
"""
from enum import Enum


def _wrap_i32(v):
    v &= 0xFFFFFFFF
    return v - (1 << 32) if v & 0x80000000 else v


def _div_toward_zero(a, b):
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


class MaskedOp(Enum):
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"

    def apply(self, a, b):
        if self is MaskedOp.ADD:
            r = a + b
        elif self is MaskedOp.SUB:
            r = a - b
        elif self is MaskedOp.MUL:
            r = a * b
        else:
            if b == 0:
                raise ZeroDivisionError("masked division by zero")
            r = _div_toward_zero(a, b)
        return _wrap_i32(r)


def unmask(reg, pair):
    n = len(reg)
    x, y = pair
    return reg[x % n] ^ reg[y % n]


def masked_op(reg, op, a, b, c):
    """reg[c_x] = op(a, b) ^ reg[c_y], with a and b unmasked only transiently."""
    n = len(reg)
    c_x, c_y = c
    reg[c_x % n] = _wrap_i32(op.apply(unmask(reg, a), unmask(reg, b)) ^ reg[c_y % n])


def masked_add(reg, a, b, c):
    masked_op(reg, MaskedOp.ADD, a, b, c)


def masked_sub(reg, a, b, c):
    masked_op(reg, MaskedOp.SUB, a, b, c)


def masked_mul(reg, a, b, c):
    masked_op(reg, MaskedOp.MUL, a, b, c)


def masked_div(reg, a, b, c):
    masked_op(reg, MaskedOp.DIV, a, b, c)


def masked_move(reg, src, dst):
    """Makes pair `dst` hold the value of pair `src`, keeping dst's mask register."""
    n = len(reg)
    d_x, d_y = dst
    reg[d_x % n] = _wrap_i32(unmask(reg, src) ^ reg[d_y % n])


def swap_registers(reg, a, b):
    n = len(reg)
    reg[a % n], reg[b % n] = reg[b % n], reg[a % n]
