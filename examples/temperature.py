"""
Example that shows a couple of reactive properties that keep
a derived value and a log in sync
"""

from reactive_property import reactive_property


class Thermostat:
    def __init__(self):
        self.celsius = reactive_property(20.0)
        self.fahrenheit = reactive_property()
        self.history = []

        self.celsius.on(self._update_fahrenheit)
        self.fahrenheit.on(self._record)

    def _update_fahrenheit(self, celsius):
        self.fahrenheit(celsius * 9 / 5 + 32)

    def _record(self, new, old):
        self.history.append((old, new))


if __name__ == "__main__":
    thermostat = Thermostat()
    # The default value of celsius was already propagated
    assert thermostat.fahrenheit() == 68.0

    listener = thermostat.celsius.on(
        lambda value: print(f"Temperature is now: {value} C")  # noqa: T201
    )

    # Writes return the property itself, so they can be chained
    thermostat.celsius(25.0)(30.0)
    assert thermostat.fahrenheit() == 86.0
    assert thermostat.history == [(None, 68.0), (68.0, 77.0), (77.0, 86.0)]

    thermostat.celsius.off(listener)
    thermostat.celsius(0.0)
    assert thermostat.fahrenheit() == 32.0

    # Reset to the value the thermostat was created with
    thermostat.celsius(thermostat.celsius.default())
    assert thermostat.fahrenheit() == 68.0

    thermostat.celsius.destroy()
    thermostat.celsius(100.0)
    assert thermostat.fahrenheit() == 68.0
