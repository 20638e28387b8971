import os
import subprocess
import sys


def build_command(ui_path, port=None):
    command = [sys.executable, "-m", "streamlit", "run", ui_path]
    if port:
        command += ["--server.port", str(port)]
    return command


def run_streamlit(port=None):
    """
    Launches the ui.py dashboard with Streamlit. Exits with status 1 if it cannot be started.
    """
    ui_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "ui.py")
    if not os.path.exists(ui_path):
        print(f"Error: ui.py not found at {ui_path}")
        sys.exit(1)

    print(f"Launching IndiGround dashboard from: {ui_path}")
    try:
        subprocess.run(build_command(ui_path, port), check=True)
    except FileNotFoundError:
        print("Error: Python interpreter or 'streamlit' module not found ('pip install streamlit').")
        sys.exit(1)
    except subprocess.CalledProcessError as e:
        print(f"Dashboard exited with an error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run_streamlit(os.environ.get("GROUNDOPS_PORT"))
