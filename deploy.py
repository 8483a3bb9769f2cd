"""
Contract Deployment Wrapper
Runs scripts/deploy_verifier.py from the project root
"""

import os
import subprocess
import sys

if __name__ == "__main__":
    project_root = os.path.dirname(os.path.abspath(__file__))

    # Banner goes to stderr; stdout is reserved for the deployed address
    print("=" * 70, file=sys.stderr)
    print("Verifier Contract Deployment", file=sys.stderr)
    print("=" * 70, file=sys.stderr)

    result = subprocess.run(
        [sys.executable, "-m", "scripts.deploy_verifier"],
        cwd=project_root
    )

    sys.exit(result.returncode)
