from .relative_time import (
    parse_duration as parse_duration,
    parse_relative_time as parse_relative_time,
    is_relative_time as is_relative_time,
    resolve_relative_time as resolve_relative_time,
)
