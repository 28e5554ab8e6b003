# philosophers

This package simulates the dining philosophers problem. Each philosopher
runs in its own thread. There is one lock for each fork that two
neighbours share. A monitor thread watches the table. It ends the
simulation when a philosopher starves or when every philosopher has eaten
enough.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

You can also start it with `python -m philosophers.cli` and the same
arguments.

All times are in milliseconds. Every argument must be a string of digits
only, with no sign and no spaces. Its value must not be above 2147483647.
If there are fewer than four or more than five arguments, or if any
argument is rejected, the program prints `Error` and exits with status -1.

The optional fifth argument sets a meal count. The simulation ends once
every philosopher has eaten that many meals. If you leave it out, or set
it to `0`, the simulation runs until a philosopher dies.

Example:

```
philo 5 800 200 200 7
```

Each change of state is printed as one line:

```
<milliseconds since start> <philosopher id> <message>
```

Philosophers are numbered from 1. The messages are:

- `has taken a fork`
- `is eating`
- `is sleeping`
- `is thinking`
- `died`

Nothing more is printed after the simulation has ended. If a thread
cannot be started, the program prints
`Error occured while creating or joining threads`.

## Library use

- `philosophers.parsing.parse_arguments(args)` takes a list of four or
  five strings and returns a frozen `Settings` dataclass. Its fields are
  `num_philos`, `time_to_die`, `time_to_eat`, `time_to_sleep` and
  `max_meals`. `max_meals` is `None` when there is no meal limit. It
  raises `ArgumentError`, a subclass of `ValueError`, when the arguments
  are rejected.
- `philosophers.parsing.validate(args)` checks the arguments without
  converting them. `philosophers.parsing.atoi(text)` reads a leading
  integer and ignores any text after it.
- `philosophers.simulation.Table(settings, out=None)` sets up the forks
  and the philosophers. `Table.run()` starts the philosopher threads and
  the monitor thread, and it blocks until the simulation is over. Output
  goes to `out`, or to standard output when `out` is not given.
- `philosophers.cli.main(argv=None)` runs the whole program. It returns
  `0` after a run and `-1` when the arguments are rejected.

```python
import io
from philosophers.parsing import parse_arguments
from philosophers.simulation import Table

log = io.StringIO()
Table(parse_arguments(["4", "410", "200", "200", "3"]), out=log).run()
print(log.getvalue())
```

## Running the tests

```
pip install .[test]
pytest
```