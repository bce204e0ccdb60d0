"""
System Commands Handler - Lock, sleep, restart and friends.

Two ways in:
  >         → every command, ranked by what follows the '>'
  >loc      → same, ranked by "loc"
  lock      → commands whose aliases contain the query

Descriptors come from services.system_commands.SYSTEM_COMMANDS unless
the search context supplies its own table.
"""

from typing import Optional

from watson.search.actions import RunCommand
from watson.search.router import ResultType, SearchContext, SearchHandler, SearchResult

COMMAND_PREFIX = ">"
COMMAND_PREFIX_SCORE = 5000


def parse_command_query(query: str) -> tuple[bool, str]:
    """
    Split off the command prefix.

    Returns:
        (is_command_query, command_query). Without a '>' prefix the
        query is returned unchanged.
    """
    if query.startswith(COMMAND_PREFIX):
        return True, query[len(COMMAND_PREFIX):].strip()
    return False, query


class SystemCommandsHandler(SearchHandler):
    """Offer system commands by alias or '>' prefix."""

    name = "commands"
    priority = 300

    def matches(self, query: str, collected: list[SearchResult]) -> bool:
        return True

    def rank_query(self, query: str) -> Optional[str]:
        is_command_query, command_query = parse_command_query(query)
        return command_query if is_command_query else None

    def get_results(self, query: str, context: SearchContext) -> list[SearchResult]:
        is_command_query, command_query = parse_command_query(query)
        needle = command_query.lower()

        results = []
        for cmd in context.commands:
            alias_match = any(needle in alias.lower() for alias in cmd.aliases)
            if alias_match or is_command_query:
                results.append(SearchResult(
                    id=cmd.id,
                    name=cmd.name,
                    description=cmd.description,
                    icon="system",
                    result_type=ResultType.SYSTEM_COMMAND,
                    score=COMMAND_PREFIX_SCORE if is_command_query else 0,
                    action=RunCommand(command=cmd.id),
                ))

        return results
