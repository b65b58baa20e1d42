# minishell

The parsing front end of a small interactive shell. It reads a line and
splits it into tokens: words, pipes and redirections. It expands `$VAR`
references from the environment and checks the start of the line for a
misplaced operator. It then groups the tokens into pipeline commands and
opens their redirection targets.

## Installation

```
pip install .
```

To install it with the test dependencies as well:

```
pip install ".[test]"
```

## Interactive use

```
minishell
```

This shows a `<minishell> ` prompt. After each line it prints the tokens
it found. Each token is listed with its content, its type number and its
single-quote flag:

```
Data --> [ls]
type number --> -1
flag --> 0
```

If the line starts with a pipe, or with a redirection that no word
follows, it prints `Something is wrong near line start!` on standard
error and lists no tokens. If a redirection later in the line has no
file name, it prints `minishell: missing file name after '>'` (or the
operator concerned) and lists no tokens.

Redirection targets (`< file`, `> file`, `>> file`) are created if they
do not exist. Each file is opened and closed again while the line is
being parsed.

The loop ends when input ends (Ctrl-D), with exit status 1.

```
minishell --show-path
```

This prints `PATH environment variable == ...` and exits with status 0.
If `PATH` is not set, the value shown is `(null)`.

## What it does not do

The shell does not run anything. It does not look up programs, start
processes, connect pipes or do here-documents. Once a line is parsed it
prints the token listing and shows the prompt again.

## Library use

```python
from minishell.tokens import tokenize, format_tokens, has_leading_error
from minishell.expand import replace_env, expand_variables
from minishell.commands import build_commands, format_commands

env = {"USER": "alice"}
tokens = tokenize("echo $USER | grep 'x' > out.txt")
replace_env(tokens, env)

if has_leading_error(tokens):
    print("Something is wrong near line start!")

print(format_tokens(tokens))

commands = build_commands(tokens)   # creates out.txt if it is missing
print(format_commands(commands))
for command in commands:
    command.close()

print(expand_variables("home is $HOME", {"HOME": "/home/user"}))
```

- `minishell.tokens`: `TokenType`, `Token` (with `content`, `type` and
  `single_quoted`), `tokenize`, `format_tokens` and `has_leading_error`.
- `minishell.expand`:
  - `replace_env(tokens, environ)` expands, in place, only the first `$`
    in each token. Everything after the `$` is taken as the variable
    name. A variable that is not set removes the rest of the word.
    Expansion is skipped in single-quoted tokens.
  - `expand_variables(text, environ)` replaces every `$NAME` in `text`,
    where a name is made of ASCII letters, digits and underscores.
  - Both functions use `os.environ` when `environ` is left out.
- `minishell.commands`:
  - `Command` has `full_cmd`, `input_file` and `output_file`. A
    descriptor of `-1` means no redirection. `add_arg` appends a word,
    and `close` closes the open descriptors; a `Command` can also be
    used as a context manager.
  - `build_commands(tokens)` raises `ValueError` when a redirection has
    no target.
  - `format_commands` renders the commands as text.
- `minishell.shell.parse_line(line, environ, out, err)` runs the whole
  pipeline on one line. It writes the token listing to `out` and any
  diagnostic to `err`, and returns the tokens it listed.
  `minishell.shell.main(argv)` is the command-line entry point.
- `minishell.chars` provides the character classes the lexer uses:
  `is_whitespace`, `is_symbol` and `find_dollar`.
- `minishell.textutil` provides small string helpers: `atoi`, `itoa`,
  `split`, `strtrim`, `substr`, `strnstr` and `strncmp`.

## Running the tests

```
pytest
```