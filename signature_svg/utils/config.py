import math
import numbers
import os
import yaml
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Any, Mapping, Optional
from pathlib import Path


DEFAULT_OPTIONS = {
    'title': 'Signature',
    'penWidth': 2,
    'penColour': '#145394',
}

# Option names accepted from callers, mapped onto StrokeConfig fields.
_OPTION_FIELDS = {
    'title': 'title',
    'penWidth': 'pen_width',
    'penColour': 'pen_colour',
}


@dataclass(frozen=True)
class StrokeConfig:
    """Styling applied to a rendered signature."""

    title: str = DEFAULT_OPTIONS['title']
    pen_width: float = DEFAULT_OPTIONS['penWidth']
    pen_colour: str = DEFAULT_OPTIONS['penColour']
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        pen_width = self.pen_width
        if isinstance(pen_width, bool) or not isinstance(pen_width, numbers.Real):
            raise TypeError(f"penWidth must be a number, got {pen_width!r}")
        try:
            finite = math.isfinite(pen_width)
        except OverflowError:
            finite = False
        if not finite or pen_width <= 0:
            raise ValueError(f"penWidth must be a positive finite number, got {pen_width!r}")

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "StrokeConfig":
        """
        Merge caller options over the defaults.

        Recognized keys (``title``, ``penWidth``, ``penColour``) override the
        defaults by name. Any other key is kept in ``extra`` and otherwise
        ignored.

        Raises:
            TypeError: options is not a mapping, or penWidth is not a number
            ValueError: penWidth is not positive and finite
        """
        if options is None:
            options = {}
        if not isinstance(options, Mapping):
            raise TypeError(f"Expected a mapping of options, got {type(options).__name__}")

        values = {}
        extra = {}
        for key, value in options.items():
            name = _OPTION_FIELDS.get(key)
            if name is None:
                extra[key] = value
            else:
                values[name] = value
        return cls(**values, extra=MappingProxyType(extra))

    def as_options(self) -> Dict[str, Any]:
        """Merged options using the signature pad option names."""
        options = dict(self.extra)
        options.update({
            'title': self.title,
            'penWidth': self.pen_width,
            'penColour': self.pen_colour,
        })
        return options


class Config:
    """YAML configuration handler with environment variable support."""

    def __init__(self, config_path: str):
        self.config_path = Path(config_path)
        self.config = self._load_config()
        self._resolve_paths()

    def _load_config(self) -> Dict[str, Any]:
        """Load YAML configuration file."""
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        with open(self.config_path, 'r') as f:
            config = yaml.safe_load(f)

        return config or {}

    def _resolve_paths(self):
        """Resolve environment variables and ${output.key} references."""
        section = 'output'
        if not isinstance(self.config.get(section), dict):
            return
        for key, value in self.config[section].items():
            if isinstance(value, str):
                value = os.path.expandvars(value)
                for replace_key, replace_val in self.config[section].items():
                    value = value.replace(f'${{{section}.{replace_key}}}', str(replace_val))
                self.config[section][key] = value

    def get(self, key: str, default=None):
        """Get configuration value by dot-notation key."""
        keys = key.split('.')
        value = self.config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
            if value is None:
                return default
        return value

    def set(self, key: str, value: Any):
        """Set configuration value by dot-notation key."""
        keys = key.split('.')
        config = self.config
        for k in keys[:-1]:
            config = config.setdefault(k, {})
        config[keys[-1]] = value

    def stroke_options(self) -> Dict[str, Any]:
        """Options from the ``stroke`` section, ready for StrokeConfig.from_options."""
        return dict(self.get('stroke', {}))

    def __getitem__(self, key):
        return self.config[key]

    def __repr__(self):
        return f"Config({self.config_path})"
