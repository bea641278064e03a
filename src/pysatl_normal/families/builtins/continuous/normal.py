"""
Normal distribution implementation.

Contains the mean/standard-deviation parameter object and the normal
distribution sampled by inverse transform.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_normal.distributions.distribution import Distribution
from pysatl_normal.distributions.strategies import InverseTransformSamplingStrategy
from pysatl_normal.distributions.support import ContinuousSupport
from pysatl_normal.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_normal.families.registry import DistributionRegister
from pysatl_normal.special import exp, inv_phi, one_over_sqrt_2pi, phi, resolve_dtype
from pysatl_normal.textio import ParseError, TextScanner, format_scalar
from pysatl_normal.types import DistributionName

if TYPE_CHECKING:
    from typing import Any, ClassVar

    from pysatl_normal.distributions.strategies import SamplingStrategy
    from pysatl_normal.sources import UniformSource
    from pysatl_normal.types import FloatDType, TextTag

logger = logging.getLogger(__name__)

_SAMPLING_STRATEGY = InverseTransformSamplingStrategy()


@parametrization(name="meanStd")
class NormalParameters[F: np.floating[Any]](Parametrization):
    """
    Mean/standard-deviation parameters of a normal distribution.

    Parameters
    ----------
    mu : float, default 0
        Mean of the distribution.
    sigma : float, default 1
        Standard deviation of the distribution. Not checked on assignment;
        see :meth:`validate`.
    dtype : dtype-like, default numpy.float64
        Floating precision of the stored values.

    Notes
    -----
    Equality is exact field-wise ``==`` with no tolerance, so parameters
    holding ``nan`` never compare equal. Instances are mutable and therefore
    unhashable.
    """

    __slots__ = ("_mu", "_sigma", "_dtype")
    __parameter_names__ = ("mu", "sigma")

    def __init__(self, mu: Any = 0, sigma: Any = 1, *, dtype: Any = None) -> None:
        self._dtype = cast("type[F]", resolve_dtype(dtype))
        self._mu: F = self._dtype(mu)
        self._sigma: F = self._dtype(sigma)

    @property
    def dtype(self) -> type[F]:
        return self._dtype

    @property
    def mu(self) -> F:
        return self._mu

    @mu.setter
    def mu(self, mu_new: Any) -> None:
        self._mu = self._dtype(mu_new)

    @property
    def sigma(self) -> F:
        return self._sigma

    @sigma.setter
    def sigma(self, sigma_new: Any) -> None:
        self._sigma = self._dtype(sigma_new)

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        """Check that standard deviation is positive."""
        return self._sigma > 0

    def copy(self) -> NormalParameters[F]:
        return NormalParameters(self._mu, self._sigma, dtype=self._dtype)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NormalParameters):
            return NotImplemented
        return bool(self._mu == other._mu and self._sigma == other._sigma)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(mu={self._mu!r}, sigma={self._sigma!r}, "
            f"dtype={self._dtype.__name__})"
        )

    def serialize(self) -> str:
        """
        Canonical text form ``(<mu> <sigma>)``.

        Each scalar is printed in fixed notation with ``max_digits10 + 1``
        fractional digits of the dtype, enough to read back the same value
        for magnitudes of at least ``0.01``.
        """
        mu = format_scalar(self._mu, self._dtype)
        sigma = format_scalar(self._sigma, self._dtype)
        return f"({mu} {sigma})"

    __str__ = serialize

    @classmethod
    def scan(cls, scanner: TextScanner, *, dtype: Any = None) -> NormalParameters[Any]:
        """
        Read ``(<mu> <sigma>)`` at the scanner's position.

        Raises
        ------
        ParseError
            If the text does not match; the scanner position is then
            unspecified.
        """
        dtype = resolve_dtype(dtype)
        scanner.expect("(")
        mu = scanner.read_scalar(dtype)
        scanner.expect(" ")
        sigma = scanner.read_scalar(dtype)
        scanner.expect(")")
        return cls(mu, sigma, dtype=dtype)

    @classmethod
    def parse(cls, text: str, *, dtype: Any = None) -> NormalParameters[Any]:
        """
        Parse the canonical text form.

        Parameters
        ----------
        text : str
            ``(<mu> <sigma>)``, optionally followed by whitespace.
        dtype : dtype-like, default numpy.float64
            Precision of the result.

        Raises
        ------
        ParseError
            If ``text`` is malformed.
        """
        scanner = TextScanner(text)
        params = cls.scan(scanner, dtype=dtype)
        scanner.expect_end()
        return params

    def load(self, text: str) -> None:
        """
        Replace both fields from the canonical text form.

        Raises
        ------
        ParseError
            If ``text`` is malformed. The object is left unchanged.
        """
        try:
            parsed = self.parse(text, dtype=self._dtype)
        except ParseError:
            logger.debug("Rejected normal parameters text %r", text)
            raise
        self._mu, self._sigma = parsed._mu, parsed._sigma


class NormalDistribution[F: np.floating[Any]](Distribution):
    """
    Normal (Gaussian) distribution sampled by inverse transform.

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

    Parameters
    ----------
    mu : float or NormalParameters, default 0
        Mean, or a complete parameter object (then ``sigma`` is ignored).
    sigma : float, default 1
        Standard deviation.
    dtype : dtype-like, optional
        Floating precision. Defaults to the dtype of a given parameter object,
        otherwise ``numpy.float64``.

    Notes
    -----
    The distribution holds no state besides its parameters. ``sample``,
    ``pdf``, ``cdf`` and ``icdf`` never validate their input and never raise:
    ``sigma <= 0`` or probabilities outside ``[0, 1]`` produce ``nan`` or
    ``inf``. numpy floating-point warnings are silenced on these paths.
    """

    __slots__ = ("_param",)
    __text_tag__: ClassVar[TextTag] = DistributionName.NORMAL

    def __init__(
        self, mu: Any | NormalParameters[F] = 0, sigma: Any = 1, *, dtype: Any = None
    ) -> None:
        if isinstance(mu, NormalParameters):
            dtype = mu.dtype if dtype is None else dtype
            self._param: NormalParameters[F] = NormalParameters(mu.mu, mu.sigma, dtype=dtype)
        else:
            self._param = NormalParameters(mu, sigma, dtype=dtype)

    @property
    def dtype(self) -> FloatDType:
        return self._param.dtype

    @property
    def support(self) -> ContinuousSupport:
        return ContinuousSupport()

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return _SAMPLING_STRATEGY

    @property
    def param(self) -> NormalParameters[F]:
        """A copy of the held parameters."""
        return self._param.copy()

    @param.setter
    def param(self, param_new: NormalParameters[Any]) -> None:
        self._param = NormalParameters(param_new.mu, param_new.sigma, dtype=self.dtype)

    @property
    def mu(self) -> F:
        return self._param.mu

    @mu.setter
    def mu(self, mu_new: Any) -> None:
        self._param.mu = mu_new

    @property
    def sigma(self) -> F:
        return self._param.sigma

    @sigma.setter
    def sigma(self, sigma_new: Any) -> None:
        self._param.sigma = sigma_new

    def validate(self) -> None:
        """
        Check the parameter constraints (``sigma > 0``).

        Raises
        ------
        ValueError
            If a constraint does not hold.
        """
        self._param.validate()

    def reset(self) -> None:
        """Reset internal state. The normal distribution has none."""

    def sample(
        self, source: UniformSource[Any], param: NormalParameters[Any] | None = None
    ) -> F:
        """
        Draw one variate.

        Parameters
        ----------
        source : UniformSource
            Called exactly once.
        param : NormalParameters, optional
            Parameters to sample with instead of the held ones. The receiver
            is not modified.

        Returns
        -------
        scalar
            ``icdf(source())``.
        """
        if param is not None:
            return NormalDistribution(param, dtype=self.dtype).sample(source)
        return self.icdf(source())

    def min(self) -> F:
        return self._param.dtype(-np.inf)

    def max(self) -> F:
        return self._param.dtype(np.inf)

    def _as_input(self, x: Any) -> Any:
        arr = np.asarray(x, dtype=self._param.dtype)
        return arr[()] if arr.ndim == 0 else arr

    def pdf(self, x: Any) -> Any:
        """Probability density at ``x`` (scalar or array)."""
        p = self._param
        with np.errstate(all="ignore"):
            t = self._as_input(x) - p.mu
            return one_over_sqrt_2pi(p.dtype) / p.sigma * exp(t * t / (-2 * p.sigma * p.sigma))

    def cdf(self, x: Any) -> Any:
        """Cumulative probability ``P(X <= x)`` (scalar or array)."""
        p = self._param
        with np.errstate(all="ignore"):
            return phi((self._as_input(x) - p.mu) / p.sigma)

    def icdf(self, p: Any) -> Any:
        """Quantile for probability ``p``; ``icdf(0) = -inf``, ``icdf(1) = inf``."""
        param = self._param
        with np.errstate(all="ignore"):
            return inv_phi(self._as_input(p)) * param.sigma + param.mu

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NormalDistribution):
            return NotImplemented
        return self._param == other._param

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(mu={self.mu!r}, sigma={self.sigma!r}, "
            f"dtype={self.dtype.__name__})"
        )

    def serialize(self) -> str:
        """
        Canonical text form ``[normal (<mu> <sigma>)]``.

        Fixed notation cannot hold every digit of very small magnitudes:
        parameters below ``0.01`` in absolute value may come back rounded,
        and a ``sigma`` under ``1e-18`` (``1e-10`` for float32) may print as zero.
        """
        return f"[{self.__text_tag__} {self._param.serialize()}]"

    __str__ = serialize

    @classmethod
    def parse(cls, text: str, *, dtype: Any = None) -> NormalDistribution[Any]:
        """
        Parse the canonical text form.

        Leading and trailing whitespace is allowed around
        ``[normal (<mu> <sigma>)]``.

        Raises
        ------
        ParseError
            If ``text`` is malformed.
        """
        scanner = TextScanner(text)
        scanner.skip_spaces()
        scanner.expect(f"[{cls.__text_tag__} ")
        params = NormalParameters.scan(scanner, dtype=dtype)
        scanner.expect("]")
        scanner.expect_end()
        return cls(params)

    def load(self, text: str) -> None:
        """
        Replace the parameters from the canonical text form.

        Raises
        ------
        ParseError
            If ``text`` is malformed. The distribution is left unchanged.
        """
        try:
            parsed = self.parse(text, dtype=self.dtype)
        except ParseError:
            logger.debug("Rejected normal distribution text %r", text)
            raise
        self._param = parsed._param


def configure_normal_family() -> None:
    """
    Register the normal distribution under its text tag.
    """
    if DistributionRegister.contains(NormalDistribution.__text_tag__):
        return
    DistributionRegister.register(NormalDistribution)
