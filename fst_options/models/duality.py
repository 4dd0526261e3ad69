"""Put-call duality wrapper model."""

from __future__ import annotations

import numpy as np

from ..base_cf import CharacteristicExponent


class DualExponent(CharacteristicExponent):
    """
    Put-call duality model wrapper.
    C(S0, K, r, q, T, X) = P(K, S0, q, r, T, X*)
    where X* is X under the share measure, with Levy exponent
    psi*(w) = psi(-w - i) - psi(-i).

    In terms of Psi (which carries the -r discount) this is simply
    Psi*(k) = Psi(-k - i / (2 pi)): the shift by psi(-i) = r - q and the swap
    of r and q cancel. The wrapped model's exponent must therefore be analytic
    in k.
    """

    name = "dual"

    def __init__(self, base_model: CharacteristicExponent):
        super().__init__(
            r=base_model.q,
            q=base_model.r,
            vol=base_model.vol,
            params=base_model.params,
        )
        self.base_model = base_model

    def exponent(self, k, xp=np):
        return self.base_model.exponent(-k - 1j / (2.0 * np.pi), xp)

    def variance_rate(self) -> float:
        # Use base model variance
        return self.base_model.variance_rate()

    def __repr__(self) -> str:
        return f"DualExponent({self.base_model!r})"
