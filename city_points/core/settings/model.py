# ========================
# file: city_points/core/settings/model.py
# ========================
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Union


# --- Варианты алгоритма: каждый несет только свои параметры ---

@dataclass(frozen=True)
class SimpleSpread:
    """Независимые равномерные точки по всему прямоугольнику."""

    name: str = field(default="simple", init=False)


@dataclass(frozen=True)
class CityLikeSpread:
    """Редкий внешний слой + плотное внутреннее ядро."""

    name: str = field(default="city_like", init=False)


@dataclass(frozen=True)
class UniformSpread:
    """Точки на сетке квантования с одинаковым шагом по обеим осям."""

    name: str = field(default="uniform", init=False)


@dataclass(frozen=True)
class CircleSpread:
    """Равномерные по площади точки внутри круга радиуса `radius`."""

    radius: float
    name: str = field(default="circle", init=False)


Algorithm = Union[SimpleSpread, CityLikeSpread, UniformSpread, CircleSpread]


@dataclass(frozen=True)
class GenerationSettings:
    start_x: float
    start_y: float
    width: float
    length: float
    amount: int
    algorithm: Algorithm = field(default_factory=SimpleSpread)
    seed: Optional[int] = None
    use_seed: bool = False

    @property
    def is_circular(self) -> bool:
        return isinstance(self.algorithm, CircleSpread)

    def with_region(
        self,
        start_x: float,
        start_y: float,
        width: float,
        length: float,
        amount: int,
    ) -> "GenerationSettings":
        """Производная копия с другой областью и количеством. Оригинал не меняется."""
        return replace(
            self,
            start_x=start_x,
            start_y=start_y,
            width=width,
            length=length,
            amount=amount,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "start_x": self.start_x,
            "start_y": self.start_y,
            "width": self.width,
            "length": self.length,
            "amount": self.amount,
            "algorithm": self.algorithm.name,
            "seed": self.seed,
            "use_seed": bool(self.use_seed),
        }
        if isinstance(self.algorithm, CircleSpread):
            data["circle_radius"] = self.algorithm.radius
        return data
