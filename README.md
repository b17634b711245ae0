# nanotekspice

A small simulator for digital logic circuits whose pins carry tristate
values: `0`, `1` and undefined `U`. A circuit is described in a text file
that declares chipsets and the links between their pins; the shell then
reads commands to set values, advance time and display the outputs.

## Installation

```
pip install .
```

## Usage

```
nanotekspice circuit.nts
```

The command expects exactly one argument, the circuit file, and then reads
shell commands from standard input. On any error (unreadable file, invalid
instruction, unknown component in a link, duplicate name, wrong number of
arguments) it prints a message on standard error and exits with status 84;
otherwise it exits with status 0.

### Circuit files

```
# a constant wired to an output
.chipsets:
input a
true  t
output out

.links:
t:1 out:1
```

Everything after a `#` is a comment. The `.chipsets:` section declares
`<type> <name>` pairs; the `.links:` section joins two `<name>:<pin>`
pairs, and each link is recorded in both directions. A file is rejected
(`InvalidFileInstruction`) unless it declares at least one `input` (or
`clock`) name and at least one `output`.

Available component types:

| Type     | Pins                         | Behaviour                                   |
|----------|------------------------------|---------------------------------------------|
| `true`   | 1                            | yields the state of its pin, initially `1`  |
| `output` | 1                            | shows the value its pin is linked to        |
| `or`     | 1, 2 in; 3 out               | tristate OR                                 |
| `xor`    | 1, 2 in; 3 out               | tristate XOR                                |

Asking a gate for a pin other than 3 gives `U`.

### Shell commands

| Command      | Effect                                                        |
|--------------|---------------------------------------------------------------|
| `name=value` | set pin 1 of component `name` to `0`, `1` or `U`              |
| `simulate`   | advance one tick and recompute the report                     |
| `display`    | print the last report: tick, inputs and outputs               |
| `loop`       | simulate repeatedly until Ctrl-C, then print the last report  |
| `exit`       | leave the shell (end of input does the same)                  |

Any other line prints `Invalid Command`.

## Library use

```python
import io
from nanotekspice.parsing import parse_text
from nanotekspice.shell import Shell

shell = parse_text(Shell(), """
.chipsets:
input a
true t
output out
.links:
t:1 out:1
""")
out = io.StringIO()
shell.run(["simulate", "display"], out)
print(out.getvalue())
```

Components can also be built and wired by hand:

```python
from nanotekspice.circuit import Tristate
from nanotekspice.shell import Shell

shell = Shell()
shell.add_component("t1", "true")
shell.add_component("t2", "true")
gate = shell.add_component("gate", "xor")
gate.set_link(1, "t1", 1)
gate.set_link(2, "t2", 1)
assert gate.compute(3, shell.circuit) is Tristate.FALSE
```

Modules:

- `nanotekspice.circuit`: `Tristate`, `Pin`, `Circuit` and the abstract
  `Component` base.
- `nanotekspice.components`: `OrComponent`, `XorComponent`,
  `OutputComponent`, `TrueComponent`.
- `nanotekspice.factory`: `Factory`, building components by type name.
- `nanotekspice.shell`: `Shell` and its errors `NoChipsetFailure`,
  `ComponentDontExist`, `InvalidFileInstruction`.
- `nanotekspice.parsing`: `parse_text`, `parse_file`, `Section`,
  `NameAlreadyUsed`.
- `nanotekspice.utils`: `split_words`, `read_file`, `write_in_file`,
  `remove_comment`, `FileError`.
- `nanotekspice.cli`: `main`, the command's entry point.

## What it does not do

Only the four component types above exist. `input`, `clock`, `false`,
`and`, `not`, `logger` and the 40xx chip types are not provided: a line
such as `input a` is accepted and records `a` as an input name, but no
component is created, so `a` never appears in the report, cannot be set
with `a=1`, and any link naming it fails with `ComponentDontExist`. Other
unknown types are silently ignored in the same way.

## Running the tests

```
pip install .[test]
pytest
```