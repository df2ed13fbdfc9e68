"""Runner preference formats.

Preferences are stored as JSON text on the user row and come in two shapes:

- legacy: a flat JSON array of free-form tags, e.g. ``["仅校内"]``
- structured: a JSON object with optional ``types``, ``priceMin``,
  ``priceMax`` and ``tags`` keys

``parse_preferences`` decides which one a stored value is. Matching code
only ever talks to the returned object.
"""

import json
import math
from dataclasses import dataclass, field
from numbers import Real

from campusgo.constants import ORDER_TYPES


class PreferenceFormatError(ValueError):
    """Stored preference data could not be understood."""


@dataclass(frozen=True)
class LegacyPreferences:
    tags: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        # Legacy tags never act as matching criteria
        return True

    def accepts(self, order_type: str, price: float) -> bool:
        return False

    def to_json(self):
        return list(self.tags)


@dataclass(frozen=True)
class StructuredPreferences:
    types: tuple[str, ...] = ()
    price_min: float | None = None
    price_max: float | None = None
    tags: tuple[str, ...] = field(default=())

    @property
    def is_empty(self) -> bool:
        """True when no type or price criteria are configured.

        Tags alone do not count.
        """
        return not self.types and self.price_min is None and self.price_max is None

    def accepts(self, order_type: str, price: float) -> bool:
        if self.is_empty:
            return False
        if self.types and order_type not in self.types:
            return False
        if self.price_min is not None and price < self.price_min:
            return False
        if self.price_max is not None and price > self.price_max:
            return False
        return True

    def to_json(self):
        data = {}
        if self.types:
            data['types'] = list(self.types)
        if self.price_min is not None:
            data['priceMin'] = self.price_min
        if self.price_max is not None:
            data['priceMax'] = self.price_max
        if self.tags:
            data['tags'] = list(self.tags)
        return data


def _string_list(value, name):
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise PreferenceFormatError(f'{name} must be a list of strings')
    return tuple(value)


def _price(value, name):
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, Real):
        raise PreferenceFormatError(f'{name} must be a number')
    if not math.isfinite(value):
        raise PreferenceFormatError(f'{name} must be a finite number')
    if value < 0:
        raise PreferenceFormatError(f'{name} must not be negative')
    return float(value)


def parse_preferences(raw):
    """Load stored preferences into a preference object.

    Args:
        raw: JSON text as stored, an already decoded list/dict, or None

    Returns:
        LegacyPreferences, StructuredPreferences, or None when unset

    Raises:
        PreferenceFormatError: the value is neither format
    """
    if raw is None or raw == '':
        return None
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            raise PreferenceFormatError(f'Invalid preferences JSON: {e}') from e
        if raw is None:
            return None

    if isinstance(raw, list):
        return LegacyPreferences(tags=_string_list(raw, 'tags'))

    if isinstance(raw, dict):
        return StructuredPreferences(
            types=_string_list(raw.get('types'), 'types'),
            price_min=_price(raw.get('priceMin'), 'priceMin'),
            price_max=_price(raw.get('priceMax'), 'priceMax'),
            tags=_string_list(raw.get('tags'), 'tags'),
        )

    raise PreferenceFormatError(f'Unsupported preferences value: {type(raw).__name__}')


def validate_preferences_update(data) -> StructuredPreferences:
    """Validate preferences submitted by a user.

    New writes must use the structured format.
    """
    if not isinstance(data, dict):
        raise PreferenceFormatError('Preferences must be an object')
    prefs = parse_preferences(data)
    unknown = [t for t in prefs.types if t not in ORDER_TYPES]
    if unknown:
        raise PreferenceFormatError(f"Unknown order types: {', '.join(unknown)}")
    if (prefs.price_min is not None and prefs.price_max is not None
            and prefs.price_min > prefs.price_max):
        raise PreferenceFormatError('priceMin must not exceed priceMax')
    return prefs
