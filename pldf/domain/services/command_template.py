"""Rendering of PLDF command templates for a target agent.

Templates are markdown files with YAML frontmatter. The frontmatter carries a
``description`` and a ``scripts`` block with one command per script variant:

    ---
    description: Validate the design stage
    scripts:
      sh: scripts/bash/check.sh --json
      ps: scripts/powershell/check.ps1 -Json
    ---
"""

import re

from pldf.domain.value_objects.release import Agent, ScriptVariant

ARGS_PLACEHOLDER = "$ARGUMENTS"
PLDF_DIRS = ("memory", "scripts", "templates", "hints")

_KEY_LINE = re.compile(r"^[a-zA-Z].*:")
_PATH_PATTERNS = {
    name: re.compile(rf"(^|\s|`)/?{name}/") for name in PLDF_DIRS
}


def extract_script_command(content: str, variant: ScriptVariant) -> str:
    match = re.search(
        rf"^[ \t]*{re.escape(variant.value)}:[ \t]*(.*)$", content, re.MULTILINE
    )
    return match.group(1).strip() if match else ""


def strip_scripts_block(content: str) -> str:
    """Remove the ``scripts:`` mapping from the frontmatter, keeping other keys."""
    out: list[str] = []
    dash_count = 0
    in_frontmatter = False
    skipping = False

    for line in content.split("\n"):
        if line == "---":
            dash_count += 1
            in_frontmatter = dash_count == 1
            skipping = False
            out.append(line)
            continue
        if in_frontmatter:
            if line == "scripts:":
                skipping = True
                continue
            if skipping and _KEY_LINE.match(line):
                skipping = False
            elif skipping and line[:1] in (" ", "\t"):
                continue
        out.append(line)

    return "\n".join(out)


def rewrite_paths(content: str) -> str:
    """Prefix bare memory/, scripts/, templates/ and hints/ references with .pldf/."""
    lines = []
    for line in content.split("\n"):
        for name, pattern in _PATH_PATTERNS.items():
            if f".pldf/{name}/" in line:
                continue
            line = pattern.sub(rf"\1.pldf/{name}/", line)
        lines.append(line)
    return "\n".join(lines)


def render_command(content: str, agent: Agent, variant: ScriptVariant) -> str:
    content = content.replace("\r", "")
    script_command = extract_script_command(content, variant)

    body = content.replace("{SCRIPT}", script_command)
    body = strip_scripts_block(body)
    body = body.replace("{ARGS}", ARGS_PLACEHOLDER).replace("__AGENT__", agent.value)
    body = rewrite_paths(body)

    return body.rstrip("\n") + "\n"
