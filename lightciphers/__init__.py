"""Reference implementations of lightweight block ciphers.

Modules: ktantan, led, led_tables, mibs, piccolo, sea, simon, skipjack, speck.
"""

__version__ = "0.1.0"
__all__ = [
    "ktantan",
    "led",
    "led_tables",
    "mibs",
    "piccolo",
    "sea",
    "simon",
    "skipjack",
    "speck",
]