"""Capabilities: resolve an implementation through its base classes.

Registering a class also maps each of its base classes (except builtin and
standard-library ones) to it under the same name. Resolving by the base class
returns the very same singleton as resolving the class itself.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from wiregraph import Container


class Notifier(ABC):
    @abstractmethod
    def send(self, message: str) -> str: ...


class EmailNotifier(Notifier):
    def send(self, message: str) -> str:
        return f"email:{message}"


class SmsNotifier(Notifier):
    def send(self, message: str) -> str:
        return f"sms:{message}"


class Alerts:
    def __init__(self, notifier: Notifier) -> None:
        self.notifier = notifier


def main() -> None:
    container = Container()
    container.register_type(EmailNotifier)
    container.register_type(SmsNotifier, "sms")
    container.register_type(Alerts)

    alerts = container.resolve(Alerts)
    print(f"alert={alerts.notifier.send('disk full')}")  # => alert=email:disk full

    sms = container.resolve(Notifier, "sms")
    print(f"sms={sms.send('ping')}")  # => sms=sms:ping

    shared = container.resolve(Notifier) is container.resolve(EmailNotifier)
    print(f"shared={shared}")  # => shared=True


if __name__ == "__main__":
    main()
