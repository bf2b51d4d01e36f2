"""Shell integration snippets.

A child process cannot change its parent shell's directory, so ``jump``,
``setjump`` and ``deljump`` are defined as shell functions that call the
CLI and ``cd`` to the path printed by ``jump --emit-path``. Each snippet
also registers alias completion through the hidden ``complete`` command.
"""

from jumpmap.exceptions import ValidationError

_EXE = "@EXE@"

_BASH = r"""# jumpmap shell integration (bash)
jump() {
    if [ $# -eq 0 ]; then
        command @EXE@ jump
        return
    fi
    local target
    target="$(command @EXE@ jump --emit-path -- "$1")" || return
    if [ -n "$target" ]; then
        cd -- "$target" && printf "Jumped to '%s' -> %s\n" "$1" "$target"
    fi
}

setjump() { command @EXE@ setjump -- "$@"; }
deljump() { command @EXE@ deljump -- "$@"; }

_jumpmap_complete() {
    [ "$COMP_CWORD" -eq 1 ] || return
    local IFS=$'\n'
    COMPREPLY=($(command @EXE@ complete -- "${COMP_WORDS[COMP_CWORD]}" 2>/dev/null | cut -f1))
}
complete -F _jumpmap_complete jump setjump deljump
"""

_ZSH = r"""# jumpmap shell integration (zsh)
jump() {
    if (( $# == 0 )); then
        command @EXE@ jump
        return
    fi
    local target
    target="$(command @EXE@ jump --emit-path -- "$1")" || return
    if [[ -n "$target" ]]; then
        cd -- "$target" && printf "Jumped to '%s' -> %s\n" "$1" "$target"
    fi
}

setjump() { command @EXE@ setjump -- "$@"; }
deljump() { command @EXE@ deljump -- "$@"; }

_jumpmap_complete() {
    (( CURRENT == 2 )) || return
    local -a candidates
    local line
    for line in "${(@f)$(command @EXE@ complete -- "${words[CURRENT]}" 2>/dev/null)}"; do
        [[ -n "$line" ]] && candidates+=("${${line%%$'\t'*}//:/\\:}:${line#*$'\t'}")
    done
    _describe 'bookmark' candidates
}
(( $+functions[compdef] )) && compdef _jumpmap_complete jump setjump deljump
"""

_FISH = r"""# jumpmap shell integration (fish)
function jump
    if test (count $argv) -eq 0
        command @EXE@ jump
        return
    end
    set -l target (command @EXE@ jump --emit-path -- $argv[1]); or return
    if test -n "$target"
        cd $target; and printf "Jumped to '%s' -> %s\n" $argv[1] $target
    end
end

function setjump
    command @EXE@ setjump -- $argv
end

function deljump
    command @EXE@ deljump -- $argv
end

for cmd in jump setjump deljump
    complete -c $cmd -f -n '__fish_is_first_arg' -a '(command @EXE@ complete -- (commandline -ct) 2>/dev/null)'
end
"""

_POWERSHELL = r"""# jumpmap shell integration (PowerShell)
function jump {
    param([string]$Alias)
    if (-not $Alias) {
        & @EXE@ jump
        return
    }
    $target = & @EXE@ jump --emit-path -- $Alias
    if ($target) {
        Set-Location -LiteralPath $target
        Write-Host "Jumped to '$Alias' -> $target"
    }
}

function setjump {
    param([Parameter(Mandatory)][string]$Alias)
    & @EXE@ setjump -- $Alias
}

function deljump {
    param([Parameter(Mandatory)][string]$Alias)
    & @EXE@ deljump -- $Alias
}

Register-ArgumentCompleter -CommandName jump, setjump, deljump -ParameterName Alias -ScriptBlock {
    param($commandName, $parameterName, $wordToComplete, $commandAst, $fakeBoundParameters)
    & @EXE@ complete -- $wordToComplete 2>$null | ForEach-Object {
        $alias, $path = $_ -split "`t", 2
        [System.Management.Automation.CompletionResult]::new($alias, $alias, 'ParameterValue', $path)
    }
}
"""

SHELL_SCRIPTS = {
    "bash": _BASH,
    "zsh": _ZSH,
    "fish": _FISH,
    "powershell": _POWERSHELL,
}

SHELL_ALIASES = {
    "pwsh": "powershell",
}


def supported_shells() -> list[str]:
    return sorted(SHELL_SCRIPTS)


def render_init_script(shell: str, exe: str = "jumpmap") -> str:
    """Return the integration snippet for *shell* calling *exe*."""
    name = SHELL_ALIASES.get(shell.strip().lower(), shell.strip().lower())
    template = SHELL_SCRIPTS.get(name)
    if template is None:
        raise ValidationError(
            f"Unsupported shell '{shell}'. Choose one of: {', '.join(supported_shells())}."
        )
    return template.replace(_EXE, exe)
