from dataclasses import dataclass


@dataclass
class Settings:
    dns1123_subdomain_max_length: int = 253
    dns1123_label_max_length: int = 63
