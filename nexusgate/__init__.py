"""LoRa gateway helpers: airtime, schedules, host sign-in and page assembly."""

__version__ = "0.1.0"