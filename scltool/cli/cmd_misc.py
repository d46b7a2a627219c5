"""CLI：杂项命令（help）"""

from __future__ import annotations

import click


def register(group: click.Group) -> None:
    group.add_command(help_cmd)


@click.command(name="help")
@click.argument("command", required=False)
@click.pass_context
def help_cmd(ctx: click.Context, command: str | None) -> None:
    """显示命令帮助，例如 `scl help get`"""
    parent = ctx.parent
    group = parent.command
    if not command:
        click.echo(group.get_help(parent))
        return
    cmd = group.get_command(parent, command)
    if cmd is None:
        click.echo(f"Unknown command: {command}", err=True)
        ctx.exit(1)
    with click.Context(cmd, info_name=command, parent=parent) as sub_ctx:
        click.echo(cmd.get_help(sub_ctx))
