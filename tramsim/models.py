"""Concrete tram models and a factory for them."""

from __future__ import annotations

from tramsim.tram import Tram


class ModerusGamma(Tram):
    time_at_stop = 5

    def model(self) -> str:
        return f"Moderus Gamma LF 07 AC {self.tram_id}"


class ModerusBeta(Tram):
    time_at_stop = 5

    def model(self) -> str:
        return f"Moderus Beta MF 24 AC {self.tram_id}"


class PesaTwist(Tram):
    time_at_stop = 7

    def model(self) -> str:
        return f"Pesa Twist 146n {self.tram_id}"


class PesaTwist2010(Tram):
    time_at_stop = 7

    def model(self) -> str:
        return f"Pesa Twist 2010 NW {self.tram_id}"


class Konstal(Tram):
    time_at_stop = 9

    def model(self) -> str:
        return f"Konstal 105 Na {self.tram_id}"


class Protram(Tram):
    time_at_stop = 9

    def model(self) -> str:
        return f"Protram 105 NWr {self.tram_id}"


_MODELS: dict[str, type[Tram]] = {
    cls.__name__: cls
    for cls in (ModerusGamma, ModerusBeta, PesaTwist, PesaTwist2010, Konstal, Protram)
}


def create_tram(model_name: str, tram_id: int) -> Tram:
    """Build a tram of the model named by its class name."""
    try:
        cls = _MODELS[model_name]
    except KeyError:
        raise ValueError(f"unknown tram model: {model_name!r}") from None
    return cls(tram_id)