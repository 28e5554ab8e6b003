"""Threads, forks and the monitor of the dining-philosophers simulation."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

from philosophers.parsing import Settings

_MONITOR_INTERVAL = 0.0005
_SLEEP_STEP = 0.0002
_ODD_START_DELAY = 0.0005
_MIN_THINK = 5
_MAX_THINK = 100


def now_ms() -> int:
    """Current wall-clock time in whole milliseconds."""
    return int(time.time() * 1000)


def precise_sleep(milliseconds: int) -> None:
    """Sleep in short steps until at least `milliseconds` have passed."""
    start = now_ms()
    while now_ms() - start < milliseconds:
        time.sleep(_SLEEP_STEP)


def think_time(settings: Settings) -> int:
    """How long a philosopher thinks: half the time to die minus eating, clamped."""
    value = settings.time_to_die // 2 - settings.time_to_eat
    return max(_MIN_THINK, min(_MAX_THINK, value))


class Philosopher:
    """One seat at the table, run in its own thread."""

    def __init__(
        self,
        table: Table,
        philo_id: int,
        right_fork: threading.Lock,
        left_fork: threading.Lock | None,
    ) -> None:
        self.table = table
        self.philo_id = philo_id
        self.right_fork = right_fork
        self.left_fork = left_fork
        self.meals_eaten = 0
        self.last_meal = now_ms()

    def _say(self, message: str) -> None:
        self.table.print_state(self, message)

    def record_meal(self) -> None:
        """Count a meal and reset the starvation clock."""
        with self.table.meals_lock:
            self.meals_eaten += 1
            self.last_meal = now_ms()

    def _became_full(self) -> bool:
        limit = self.table.settings.max_meals
        if limit is None:
            return False
        with self.table.meals_lock:
            if self.meals_eaten == limit:
                self.table.full_philos += 1
                return True
        return False

    def eat(self) -> bool:
        """Take both forks, eat, put them back; False when this philosopher must stop."""
        if self.philo_id % 2 == 0:
            first, second = self.left_fork, self.right_fork
        else:
            first, second = self.right_fork, self.left_fork
        with first:
            self._say("has taken a fork")
            with second:
                self._say("has taken a fork")
                self._say("is eating")
                self.record_meal()
                precise_sleep(self.table.settings.time_to_eat)
        if self._became_full() or self.table.is_over():
            return False
        return True

    def sleep(self) -> bool:
        """Sleep for the configured time; False if the simulation has ended."""
        if self.table.is_over():
            return False
        self._say("is sleeping")
        precise_sleep(self.table.settings.time_to_sleep)
        return True

    def think(self) -> bool:
        """Think for a short while; False if the simulation has ended."""
        if self.table.is_over():
            return False
        duration = think_time(self.table.settings)
        self._say("is thinking")
        precise_sleep(duration)
        return True

    def _alone(self) -> None:
        with self.right_fork:
            self._say("has taken a fork")
        time.sleep(self.table.settings.time_to_die / 1000)
        self._say("died")
        self.table.end()

    def run(self) -> None:
        """Thread body: eat, sleep and think until the simulation stops."""
        if self.table.settings.num_philos == 1:
            self._alone()
            return
        if self.philo_id % 2:
            time.sleep(_ODD_START_DELAY)
        while not self.table.is_over():
            if not self.eat() or not self.sleep() or not self.think():
                break


class Table:
    """Shared state of one simulation: forks, locks, philosophers and the log."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.write_lock = threading.Lock()
        self.death_lock = threading.Lock()
        self.meals_lock = threading.Lock()
        self.full_philos = 0
        self._over = False
        self._start = time.time()
        count = settings.num_philos
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(
                self,
                index + 1,
                self.forks[index],
                None if count == 1 else self.forks[(index + 1) % count],
            )
            for index in range(count)
        ]

    def elapsed(self) -> int:
        """Milliseconds since the simulation was set up."""
        return int((time.time() - self._start) * 1000)

    def is_over(self) -> bool:
        """True once a philosopher has died or everyone has eaten enough."""
        with self.death_lock:
            return self._over

    def end(self) -> None:
        """Mark the simulation as finished."""
        with self.death_lock:
            self._over = True

    def print_state(self, philosopher: Philosopher, message: str) -> None:
        """Write '<ms> <id> <message>' unless the simulation has ended."""
        if self.is_over():
            return
        with self.write_lock:
            print(f"{self.elapsed()} {philosopher.philo_id} {message}", file=self.out)

    def someone_starved(self) -> bool:
        """Announce the first philosopher past the time to die and end the run."""
        if self.is_over():
            return True
        for philosopher in self.philosophers:
            with self.meals_lock:
                last_meal = philosopher.last_meal
            if now_ms() - last_meal > self.settings.time_to_die:
                self.print_state(philosopher, "died")
                self.end()
                return True
        return False

    def everyone_full(self) -> bool:
        """End the run when every philosopher has eaten the required meals."""
        if self.is_over():
            return True
        with self.meals_lock:
            full = self.full_philos
        if full == self.settings.num_philos:
            self.end()
            return True
        return False

    def monitor(self) -> None:
        """Watch for starvation or satiety until the simulation ends."""
        while not (self.someone_starved() or self.everyone_full()):
            time.sleep(_MONITOR_INTERVAL)

    def run(self) -> None:
        """Start every philosopher and the monitor, then wait for all of them."""
        started: list[threading.Thread] = []
        try:
            for philosopher in self.philosophers:
                thread = threading.Thread(target=philosopher.run)
                thread.start()
                started.append(thread)
            watcher = threading.Thread(target=self.monitor)
            watcher.start()
            started.append(watcher)
        except RuntimeError:
            self.end()
            for thread in started:
                thread.join()
            raise
        for thread in started:
            thread.join()