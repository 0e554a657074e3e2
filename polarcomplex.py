import functools
import logging
import math
import numbers

import numpy as np

# ───────────────────────── CONFIGURATION ──────────────────────────────────── #
DECIMALS = 5            # fixed precision of str(Complex)
REL_TOL  = 1e-9         # tolerances used by __eq__ / isclose
ABS_TOL  = 1e-12

PI = math.pi

logger = logging.getLogger(__name__)


def _ieee(method):
    """Run *method* with IEEE-754 semantics: inf/nan instead of exceptions."""
    @functools.wraps(method)
    def wrapper(*args, **kwargs):
        with np.errstate(all="ignore"):
            return method(*args, **kwargs)
    return wrapper


def _principal(angle: float) -> float:
    # atan2 yields -pi for a -0.0 imaginary part on the negative real axis
    return PI if angle == -PI else angle


def _reciprocal(x) -> float:
    with np.errstate(all="ignore"):
        return float(np.float64(1.0) / np.float64(x))


def _form(x, y, op: str) -> str:
    """Classify the operand shape of a binary operation.

    Returns "complex" for a Complex (or built-in complex) operand, "scalar"
    for a lone real number and "pair" for a Cartesian (real, imag) pair.
    """
    if isinstance(x, (Complex, complex)):
        if y is not None:
            raise TypeError(f"{op}() takes a single complex operand, got a second argument {y!r}")
        return "complex"
    if not isinstance(x, numbers.Real):
        raise TypeError(f"unsupported operand for {op}(): {type(x).__name__}")
    if y is None:
        return "scalar"
    if not isinstance(y, numbers.Real):
        raise TypeError(f"unsupported operand for {op}(): {type(y).__name__}")
    return "pair"


def _as_value(z) -> "Complex":
    return z if isinstance(z, Complex) else Complex.from_complex(z)


class Complex:
    """
    A mutable complex number kept in both Cartesian and polar form.

    Constructors
    ------------
    Complex(r, i)                  -> r + i i          (Cartesian)
    Complex(m, a, polar=True)      -> m·e^{ia}         (polar)
    Complex.from_polar(m, a)       -> m·e^{ia}
    Complex.from_complex(c)        -> built-in complex

    The four fields ``real``, ``imag``, ``magnitude`` and ``angle`` always
    describe the same point once a method returns; ``angle`` is kept in
    (-π, π].  Arithmetic methods (add, sub, mul, div, pow and their ``_polar``
    variants) mutate the value in place and return it, so calls chain.
    Undefined results (division by zero, log of zero) come out as inf/nan
    rather than raising.
    """

    __slots__ = ("real", "imag", "magnitude", "angle")

    # ---------- construction ----------
    def __init__(self, x: float = 0.0, y: float = 0.0, *, polar: bool = False):
        if polar:
            self.magnitude = float(x)
            self.angle = float(y)
            self.real = self.imag = 0.0
            self._update_cartesian()
        else:
            self.real = float(x)
            self.imag = float(y)
            self.magnitude = self.angle = 0.0
            self._update_polar()

    @classmethod
    def from_polar(cls, m: float, a: float) -> "Complex":
        """Explicit polar constructor."""
        return cls(m, a, polar=True)

    @classmethod
    def from_complex(cls, c: complex) -> "Complex":
        return cls(c.real, c.imag)

    def copy(self) -> "Complex":
        z = Complex.__new__(Complex)
        z.real, z.imag = self.real, self.imag
        z.magnitude, z.angle = self.magnitude, self.angle
        return z

    # ---------- representation sync ----------
    @_ieee
    def _update_cartesian(self) -> None:
        self.real = float(np.cos(self.angle) * self.magnitude)
        self.imag = float(np.sin(self.angle) * self.magnitude)

        if not -PI < self.angle <= PI:
            self.angle = _principal(float(np.arctan2(self.imag, self.real)))

    @_ieee
    def _update_polar(self) -> None:
        self.angle = _principal(float(np.arctan2(self.imag, self.real)))
        self.magnitude = float(np.sqrt(np.float64(self.real) ** 2 + np.float64(self.imag) ** 2))

    # ---------- addition ----------
    @_ieee
    def add(self, x, y=None) -> "Complex":
        """Add a Complex, a real number or a Cartesian (real, imag) pair."""
        form = _form(x, y, "add")
        if form == "complex":
            z = _as_value(x)
            return self.add(z.real, z.imag)
        if form == "scalar":
            return self.add(x, 0.0)

        self.real = float(np.float64(self.real) + x)
        self.imag = float(np.float64(self.imag) + y)
        self._update_polar()
        return self

    @_ieee
    def add_polar(self, m: float, a: float) -> "Complex":
        """Add the number m·e^{ia}."""
        self.real = float(np.cos(self.angle) * self.magnitude + np.cos(a) * m)
        self.imag = float(np.sin(self.angle) * self.magnitude + np.sin(a) * m)
        self._update_polar()
        return self

    # ---------- subtraction ----------
    def sub(self, x, y=None) -> "Complex":
        form = _form(x, y, "sub")
        if form == "complex":
            z = _as_value(x)
            return self.add(-z.real, -z.imag)
        if form == "scalar":
            return self.add(-x, 0.0)
        return self.add(-x, -y)

    def sub_polar(self, m: float, a: float) -> "Complex":
        return self.add_polar(-m, a)

    # ---------- multiplication ----------
    @_ieee
    def mul(self, x, y=None) -> "Complex":
        """
        Multiply by a Complex, a real number or a Cartesian (real, imag) pair.

        A Complex operand is multiplied in polar form (magnitudes multiply,
        angles add); scalars and pairs use the Cartesian product.
        """
        form = _form(x, y, "mul")
        if form == "complex":
            z = _as_value(x)
            self.magnitude *= z.magnitude
            self.angle += z.angle
            self._update_cartesian()
            return self
        if form == "scalar":
            self.real = float(np.float64(self.real) * x)
            self.imag = float(np.float64(self.imag) * x)
            self._update_polar()
            return self

        real = np.float64(self.real) * x - np.float64(self.imag) * y
        self.imag = float(np.float64(self.real) * y + np.float64(self.imag) * x)
        self.real = float(real)
        self._update_polar()
        return self

    @_ieee
    def mul_polar(self, m: float, a: float) -> "Complex":
        self.magnitude = float(np.float64(self.magnitude) * m)
        self.angle += a
        self._update_cartesian()
        return self

    # ---------- division ----------
    @_ieee
    def div(self, x, y=None) -> "Complex":
        """
        Divide by a Complex, a real number or a Cartesian (real, imag) pair.

        Dividing by zero does not raise: the parts become inf or nan.
        """
        form = _form(x, y, "div")
        if form == "complex":
            z = _as_value(x)
            if z.magnitude == 0:
                logger.debug("division by zero-magnitude value %r", z)
            return self.mul_polar(_reciprocal(z.magnitude), -z.angle)
        if form == "scalar":
            if x == 0:
                logger.debug("division by zero real scalar")
            return self.mul(_reciprocal(x))

        divide = np.float64(1.0) / (np.float64(x) ** 2 + np.float64(y) ** 2)
        if not np.isfinite(divide):
            logger.debug("division by zero-magnitude pair (%r, %r)", x, y)

        real = (self.real * x + self.imag * y) * divide
        self.imag = float((self.imag * x - self.real * y) * divide)
        self.real = float(real)
        self._update_polar()
        return self

    def div_polar(self, m: float, a: float) -> "Complex":
        """Divide via the Cartesian-pair multiply by (1/m, -a)."""
        if m == 0:
            logger.debug("division by zero magnitude (angle %r)", a)
        return self.mul(_reciprocal(m), -a)

    # ---------- exponentiation ----------
    @_ieee
    def pow(self, x, y=None) -> "Complex":
        """
        Raise to a Complex, real or Cartesian (real, imag) exponent.

        A Complex operand hands its (magnitude, angle) to the Cartesian-pair
        power, so ``z.pow(w)`` raises to |w| + arg(w)·i.  The ``**`` operator
        raises to ``w`` itself.
        """
        form = _form(x, y, "pow")
        if form == "complex":
            z = _as_value(x)
            return self.pow(z.magnitude, z.angle)
        if form == "scalar":
            return self.pow(x, 0.0)

        ln = np.log(np.float64(self.magnitude))
        angle = self.angle
        self.magnitude = float(np.exp(ln * x - angle * y))
        self.angle = float(ln * y + angle * x)
        self._update_cartesian()
        return self

    @_ieee
    def pow_polar(self, m: float, a: float) -> "Complex":
        """Raise to the exponent m·e^{ia}."""
        ln = np.log(np.float64(self.magnitude))
        cos, sin = np.cos(a), np.sin(a)
        angle = self.angle

        self.magnitude = float(np.exp(m * (ln * cos - angle * sin)))
        self.angle = float(m * (ln * sin + angle * cos))
        self._update_cartesian()
        return self

    # ---------- logarithms (new values) ----------
    @staticmethod
    @_ieee
    def ln(a, b=None) -> "Complex":
        """
        Natural log of a Complex, a real number or a Cartesian pair.

        Negative reals take the principal branch: ln(-x) = ln(x) + πi.
        """
        form = _form(a, b, "ln")
        if form == "complex":
            z = _as_value(a)
            return Complex.ln_polar(z.magnitude, z.angle)
        if form == "scalar":
            return Complex.ln_polar(a, 0.0 if a >= 0 else PI)
        return Complex.ln_polar(float(np.hypot(a, b)), float(np.arctan2(b, a)))

    @staticmethod
    @_ieee
    def ln_polar(a: float, b: float) -> "Complex":
        """Natural log of a·e^{ib}: ln|a| + bi."""
        return Complex(float(np.log(np.abs(np.float64(a)))), b)

    @staticmethod
    @_ieee
    def log(*args) -> "Complex":
        """
        Logarithm in a complex base.

        Parameters
        ----------
        *args : either ``(base, value)`` as two Complex numbers, or
                ``(a, b, c, d)`` for base a + bi and value c + di

        Returns
        -------
        Complex - a new value, log base ``base`` of ``value``.
        """
        if len(args) == 2:
            z1, z2 = (_as_value(z) for z in args)
            return Complex.log_polar(z1.magnitude, z1.angle, z2.magnitude, z2.angle)
        if len(args) == 4:
            a, b, c, d = args
            return Complex.log_polar(float(np.hypot(a, b)), float(np.arctan2(b, a)),
                                     float(np.hypot(c, d)), float(np.arctan2(d, c)))
        raise TypeError(f"log() takes 2 complex or 4 real arguments ({len(args)} given)")

    @staticmethod
    def log_polar(m1: float, a1: float, m2: float, a2: float) -> "Complex":
        """Log base m1·e^{i·a1} of m2·e^{i·a2}, via ln(value) / ln(base)."""
        return Complex.ln_polar(m2, a2).div(Complex.ln_polar(m1, a1))

    # ---------- Python-side helpers ----------
    def conjugate(self) -> "Complex":
        return Complex(self.real, -self.imag)

    def to_complex(self) -> complex:
        return complex(self.real, self.imag)

    def isclose(self, other, rel_tol: float = REL_TOL, abs_tol: float = ABS_TOL) -> bool:
        other = _as_value(other) if isinstance(other, complex) else other
        if isinstance(other, numbers.Real):
            other = Complex(other, 0.0)
        return (math.isclose(self.real, other.real, rel_tol=rel_tol, abs_tol=abs_tol)
                and math.isclose(self.imag, other.imag, rel_tol=rel_tol, abs_tol=abs_tol))

    def format(self) -> str:
        """Render as ' 3.00000 - 2.00000 i' (leading space for a non-negative real part)."""
        sign = " " if self.real >= 0 else ""
        op = "-" if self.imag < 0 else "+"
        return f"{sign}{_fixed(self.real)} {op} {_fixed(abs(self.imag))} i"

    # ---------- dunder sugar ----------
    def _operand_ok(self, other) -> bool:
        return isinstance(other, (Complex, complex, numbers.Real))

    def __iadd__(self, other):
        return self.add(other) if self._operand_ok(other) else NotImplemented

    def __isub__(self, other):
        return self.sub(other) if self._operand_ok(other) else NotImplemented

    def __imul__(self, other):
        return self.mul(other) if self._operand_ok(other) else NotImplemented

    def __itruediv__(self, other):
        return self.div(other) if self._operand_ok(other) else NotImplemented

    def __ipow__(self, other):
        return self.pow(*_exponent(other)) if self._operand_ok(other) else NotImplemented

    def __add__(self, other):
        return self.copy().add(other) if self._operand_ok(other) else NotImplemented

    def __sub__(self, other):
        return self.copy().sub(other) if self._operand_ok(other) else NotImplemented

    def __mul__(self, other):
        return self.copy().mul(other) if self._operand_ok(other) else NotImplemented

    def __truediv__(self, other):
        return self.copy().div(other) if self._operand_ok(other) else NotImplemented

    def __pow__(self, other):
        return self.copy().pow(*_exponent(other)) if self._operand_ok(other) else NotImplemented

    __radd__ = __add__
    __rmul__ = __mul__

    def __rsub__(self, other):
        return _as_scalar_value(other).sub(self) if self._operand_ok(other) else NotImplemented

    def __rtruediv__(self, other):
        return _as_scalar_value(other).div(self) if self._operand_ok(other) else NotImplemented

    def __rpow__(self, other):
        return _as_scalar_value(other).pow(self.real, self.imag) if self._operand_ok(other) else NotImplemented

    def __neg__(self):
        return Complex(-self.real, -self.imag)

    def __abs__(self):
        return self.magnitude

    def __complex__(self):
        return self.to_complex()

    def __iter__(self):
        yield self.real
        yield self.imag

    def __eq__(self, other):
        if not self._operand_ok(other):
            return NotImplemented
        return self.isclose(other)

    __hash__ = None  # mutable

    # readable REPL / print‑outs
    def __repr__(self):
        return (f"Complex(real={self.real!r}, imag={self.imag!r}, "
                f"magnitude={self.magnitude!r}, angle={self.angle!r})")

    __str__ = format


def _fixed(x: float) -> str:
    return f"{x:.{DECIMALS}f}" if math.isfinite(x) else str(x)


def _as_scalar_value(x) -> Complex:
    return Complex.from_complex(x) if isinstance(x, complex) else Complex(x, 0.0)


def _exponent(w) -> tuple:
    # operators raise to w itself: Cartesian pair for complex operands
    if isinstance(w, (Complex, complex)):
        return w.real, w.imag
    return w, 0.0


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    z = Complex(1, 2)
    print(z.div(3, 4))                                  # 0.44 + 0.08 i
    print(Complex(2, 0).pow(2))                         # 4 + 0 i
    print(Complex.log(Complex(2, 0), Complex(8, 0)))    # 3 + 0 i
    print(Complex.ln(-1))                               # 0 + π i
    print(Complex.from_polar(2, PI / 4) * Complex(3, 4))
    print(Complex(1, 1).div(0))                         # inf/nan, no exception
