import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(REPO_ROOT / "src" / "shift_wage"))

from shift_wage.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(port=3000)
