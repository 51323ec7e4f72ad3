from .dice import RollSpec, RollOutcome, ParseResult, parse_roll_spec, parse_tokens, valid_specs, roll, format_outcome
from .errors import DiceError, RollParseError, RandomnessUnavailable, InvalidDie, SettingsError
from .rng import acquire_os_generator, seeded_generator
