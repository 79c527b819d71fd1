# mhshell

A small shell core. It reads the process environment into ordered
variables, turns a list of typed tokens into a command, finds the
command on `PATH`, opens the redirection files and runs the command.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

The `mhshell` command takes one command line as its arguments, runs it
with the current environment and exits with the command's status:

```
mhshell ls -l
mhshell ls -l ">" listing.txt
```

Arguments are taken as tokens one by one: `|` is a pipe, `<`, `>`, `<<`
and `>>` take the next argument as their file name, and everything else
is a word. Quote the operators so your own shell passes them through.

If the command is not found on `PATH`, it prints
`mhd: command not found` to standard error and exits with status 1.
Other problems (an empty command, a redirection without a file name, a
file that cannot be opened) are reported as `Minishell: <message>`, also
with status 1.

## Using it from Python

String helpers live in `mhshell.strutil`:

- `split_words(s, sep)` splits on a separator, dropping empty pieces;
  `None` gives an empty list.
- `compare_prefix(s1, s2, n)` compares at most `n` bytes and returns
  zero or the difference of the first differing bytes.
- `key_length(entry)` gives the length of the key part of a `KEY=value`
  entry. The last character is never scanned, so an entry with no `=`
  gives one less than its length.

Environment handling lives in `mhshell.environment`:

- `EnvVar` is a variable with `key` and `value`.
- `parse_environ(entries)` turns `KEY=value` strings into a list of
  `EnvVar`, in order.
- `fetch_path(env)` returns the directories of the first variable whose
  key starts with `PATH`, or `None` when there is none.
- `load_env(env)` turns the variables back into `KEY=value` strings.

Tokens live in `mhshell.tokens`. A `Token` holds its `data` and a
`TokenType`: `WORD`, `REDIRECT_IN`, `REDIRECT_OUT`, `HEREDOC`, `APPEND`
or `PIPE`. Redirection tokens carry the file name as their data.

- `command_words(tokens)` gives the data of every word token.
- `full_command(tokens)` gives the argument list of the first command,
  skipping redirection tokens and stopping at the first pipe.
- `group_commands(tokens)` gives the text of each pipe-separated group,
  redirection file names included.
- `count_pipes(tokens)` counts the pipe tokens.

Running commands lives in `mhshell.executor`:

- `find_executable(paths, cmd)` returns the first executable
  `directory/cmd`, or `None`.
- `apply_redirections(tokens)` checks that every input file can be
  opened for reading and creates or truncates every output file with
  mode 0644. It returns the last output file, open for writing, or
  `None`; a file that cannot be opened raises `OSError`.
- `run(tokens, env)` resolves the command on the `PATH` of `env`, runs
  it with `env` as its environment and its output sent to the last
  output file, and returns its exit status. It raises `ShellError` for
  an empty command and `CommandNotFoundError` (a `ShellError`) when the
  command is not found.
- `main(argv=None)` is what the `mhshell` command starts; it returns
  the exit status.

## What it does not do

- There is no interactive prompt, line editing or history; one command
  line is taken from the arguments.
- Pipes are recognised and counted, but only the first command of a
  pipeline is run; the rest are ignored.
- An input file is only checked for being readable; it is not connected
  to the command's standard input.
- `<<` and `>>` tokens are read but have no effect.
- There are no built-in commands, no quoting rules, no variable
  expansion and no signal handling.