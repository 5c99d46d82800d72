"""
Effect catalog - maps effect names to effect classes and parameter types
"""

from typing import Dict, List, Optional, Type, Union, TYPE_CHECKING

from .config import EffectName
from .effects import (
    Effect,
    SolidColorEffect,
    SolidDripEffect,
    SolidCycleEffect,
    RainbowSwirlEffect,
    RainbowDripEffect,
    RainbowCycleEffect,
)

if TYPE_CHECKING:
    from lightstrip_utils.hybrid_logger import ClassLogger


EFFECT_CLASSES: Dict[EffectName, Type[Effect]] = {
    effect_class.name: effect_class
    for effect_class in (
        SolidColorEffect,
        SolidDripEffect,
        SolidCycleEffect,
        RainbowSwirlEffect,
        RainbowDripEffect,
        RainbowCycleEffect,
    )
}


def resolve_name(name: Union[EffectName, str]) -> EffectName:
    """
    Accept an EffectName or its string value ("rainbow_swirl").

    Raises:
        ValueError: If the name is not in the catalog
    """
    if isinstance(name, EffectName):
        return name
    try:
        return EffectName(name)
    except ValueError:
        valid = ", ".join(effect.value for effect in EffectName)
        raise ValueError(f"Unknown effect '{name}' (valid: {valid})") from None


def available_effects() -> List[EffectName]:
    return list(EFFECT_CLASSES)


def params_type_for(name: Union[EffectName, str]) -> Type:
    return EFFECT_CLASSES[resolve_name(name)].params_type


def create_effect(name: Union[EffectName, str], logger: Optional['ClassLogger'] = None) -> Effect:
    """Fresh effect instance for a catalog name"""
    return EFFECT_CLASSES[resolve_name(name)](logger=logger)
