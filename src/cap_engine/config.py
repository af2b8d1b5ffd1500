from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Settings snapshot used by the command line when no file is given
SETTINGS_FILE = PROJECT_ROOT / "data" / "league_settings.json"

# Salary cap per season
CAP_BY_YEAR = {
    2025: 300,
    2026: 275,
    2027: 250,
    2028: 250,
    2029: 250,
    2030: 250,
}
DEFAULT_SALARY_CAP = 250

# Year-over-year salary escalation
ESCALATION_RATE = 0.15

# Roster limits
ROSTER_SIZE = 32
PRACTICE_SQUAD_MAX = 5
PRACTICE_SQUAD_MAX_YEARS = 2
IR_MAX = 2

# Cap-hit discounts by roster status
PRACTICE_SQUAD_CAP_PCT = 0.25
IR_CAP_PCT = 0.5

# Minimums and thresholds
FREE_AGENT_MINIMUM = 5
REACQUISITION_THRESHOLD = 5
LOW_CAP_SPACE_BUFFER = 10
MINIMUM_VETERANS = 10
VETERAN_DEADLINE = "July 31"

# Loyalty bump: added on top of escalation in the Nth season with a team
LOYALTY_BUMP_YEAR = 5
LOYALTY_BUMP_AMOUNT = 5

# Season / draft defaults
DEFAULT_CURRENT_SEASON = 2025
DRAFT_ROUNDS = 4
DRAFT_PICK_YEARS_AHEAD = 2
