from enum import Enum


class ApiVersion(Enum):
    V2020_08_27 = "2020-08-27"
    V2022_08_01 = "2022-08-01"
    V2022_11_15 = "2022-11-15"

    @classmethod
    def from_string(cls, value):
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unsupported API version: {value}")


DEFAULT_API_VERSION = ApiVersion.V2022_11_15
