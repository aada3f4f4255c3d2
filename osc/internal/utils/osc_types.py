import click


class AliasedGroup(click.Group):
    """
    Resolves unambiguous prefixes of visible commands, so ``osc logo`` runs ``osc logout``.
    Hidden commands only answer to their full name.
    """

    def get_command(self, ctx, cmd_name):
        command = click.Group.get_command(self, ctx, cmd_name)
        if command:
            return command

        candidates = sorted(name for name in self.list_commands(ctx)
                            if name.startswith(cmd_name) and not self.commands[name].hidden)
        if len(candidates) == 1:
            return click.Group.get_command(self, ctx, candidates[0])
        if candidates:
            ctx.fail("'{}' is ambiguous and could mean: {}".format(
                cmd_name, ', '.join(candidates)))
        return None
