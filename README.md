# barstatus

A small status monitor. It gathers information about the machine (wifi,
battery, date and time, and more) and joins it into one status line. The
line goes either to standard output or to the name of the X root window,
where a window manager's bar picks it up.

## Installing

```
pip install .
```

This pulls in `psutil`, which the interface address components use.

## Running

```
barstatus -s      # print a status line every second
barstatus -1      # print a single status line and exit
barstatus -v      # print the version and exit
barstatus         # set the root window name repeatedly
```

`-s` writes each line to standard output instead of the root window. This
suits bars that read from a pipe. `-1` implies `-s` and stops after one line.
Flags may be combined, as in `-s1`, and `--` ends the flags. Any other flag
or operand prints a usage message and exits with status 1.

Without `-s`, `DISPLAY` must be set. The line is stored by running
`xsetroot -name`, so `xsetroot` must be on the `PATH`. On exit the root
window name is cleared.

`SIGINT` or `SIGTERM` stops the loop after the current line. `SIGUSR1` ends
the current wait early, so the line is refreshed at once.

## Components

Each piece of the status line comes from a component function. The function
takes a single argument and returns a string. It returns `None` when the
value is not available, and the line then shows `n/a`.

| module                 | functions |
|------------------------|-----------|
| `barstatus.battery`    | `battery_perc`, `battery_state`, `battery_remaining` |
| `barstatus.cpu`        | `cpu_freq`, `cpu_perc` (and the `CpuUsage` class) |
| `barstatus.disk`       | `disk_free`, `disk_perc`, `disk_total`, `disk_used` |
| `barstatus.files`      | `cat`, `num_files`, `run_command` |
| `barstatus.memory`     | `ram_free`, `ram_perc`, `ram_total`, `ram_used`, `swap_free`, `swap_perc`, `swap_total`, `swap_used`, `read_meminfo` |
| `barstatus.netspeeds`  | `netspeed_rx`, `netspeed_tx` (and the `NetSpeed` class) |
| `barstatus.network`    | `ipv4`, `ipv6`, `up` |
| `barstatus.system`     | `datetime`, `hostname`, `kernel_release`, `load_avg`, `uptime`, `gid`, `uid`, `username`, `entropy`, `temp` |
| `barstatus.volume`     | `vol_perc` |
| `barstatus.wifi`       | `wifi_essid`, `wifi_perc` (plus `rssi_to_perc` and `find_attr`) |

The components can be used on their own:

```python
from barstatus.system import datetime
from barstatus.disk import disk_free

print(datetime("%a, %d %b %R"))
print(disk_free("/"))
```

`cpu_perc`, `netspeed_rx` and `netspeed_tx` report a rate since their
previous call. The first call therefore returns `None`. `CpuUsage(stat_path)`
and `NetSpeed(interval, sysfs)` keep that state in an instance of your own,
and can read from other paths.

Sizes such as disk and memory amounts use binary prefixes, for example
`12.3 Gi`. The CPU frequency uses decimal prefixes, for example `2.4 G`.
`barstatus.util.fmt_human(num, base)` does this formatting for a base of
1000 or 1024.

## Building a line yourself

`barstatus.config` holds the default layout in `ARGS`, a tuple of
`StatusArg` entries. Each entry holds a component, a printf-style format and
an argument. The same module holds `INTERVAL` (milliseconds), `UNKNOWN_STR`
and `MAXLEN`. `component(name)` looks a component up by name and raises
`ValueError` for an unknown name. `barstatus.cli.render` turns a list of
entries into a status line and stops before the line would reach `MAXLEN`:

```python
from barstatus.cli import render
from barstatus.config import StatusArg, component

line = render(
    [
        StatusArg(component("hostname"), "%s | ", None),
        StatusArg(component("datetime"), "%s", "%F %T"),
    ],
    "n/a",
)
print(line)
```

## What it does not do

- There is no configuration file. The layout the command uses is the `ARGS`
  tuple in `barstatus.config`, and changing it means editing that module.
- Most components read Linux interfaces: `/proc`, `/sys/class/power_supply`,
  `/sys/class/net`, nl80211 netlink for wifi, and the OSS mixer device for
  volume. On other systems those components return `None`.
- It does not talk to the X server directly. Setting the root window name
  depends on the external `xsetroot` program.