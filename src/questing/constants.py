from pathlib import Path

# Progress granted to each matching quest per qualifying host event.
DEFAULT_PROGRESS_AMOUNT = 1

# Quest definition file loaded on plugin enable when no explicit path is given.
# Shipped as package data, so it resolves in source checkouts and installs alike.
DEFAULT_QUESTS_PATH = Path(__file__).resolve().parent / "data" / "quests.json"

# When True, assignment stores a per-player copy of the catalog quest instead of
# the shared catalog instance, so players do not share one progress counter.
PER_PLAYER_PROGRESS = False

# When True, inactive quests are skipped while applying progress. When False the
# whole batch stops at the first inactive quest.
SKIP_INACTIVE_QUESTS = False
