# -----------------------------------------------------------------------------
# dev_up.py: Dev Orchestrator for Crunchem
# Boots the FastAPI catalog API (uvicorn) and the Streamlit UI, checks the
# calculator registry before anything binds a port, and streams both logs.
# Key details:
#   - Binds API to API_HOST (0.0.0.0 inside containers) for port forwarding
#   - Health probe always connects via 127.0.0.1 (0.0.0.0 is not connectable)
#   - API_URL for the UI is derived after .env is loaded
# -----------------------------------------------------------------------------

from __future__ import annotations
import atexit
import os
import sys
import time
import socket
import subprocess
from pathlib import Path

# ---------------------- CONFIG (base defaults) ----------------------
PROJECT_ROOT = Path(__file__).parent.resolve()
API_APP = "api.main:app"              # uvicorn import path for FastAPI app
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))
UI_PORT  = int(os.getenv("UI_PORT",  "8501"))
UI_FILE  = PROJECT_ROOT / "ui" / "app.py"
PYTHONPATH_APPEND = os.pathsep.join([str(PROJECT_ROOT / "src"), str(PROJECT_ROOT)])

# ---------------------- HELPERS ----------------------
def echo(msg: str): print(f"[dev_up] {msg}", flush=True)
def fail(msg: str, code: int = 1): echo(f"❌ {msg}"); sys.exit(code)

def probe_host(bind_host: str) -> str:
    return "127.0.0.1" if bind_host in ("0.0.0.0", "0") else bind_host

def kill_port(port: int):
    echo(f"Checking for existing process on port {port}...")
    if sys.platform.startswith("win"):
        out = subprocess.run(["netstat", "-ano"], capture_output=True, text=True).stdout
        pids = {line.split()[-1] for line in out.splitlines() if f":{port} " in line and "LISTENING" in line}
        for pid in pids:
            echo(f"Killing PID {pid} on port {port}")
            subprocess.run(["taskkill", "/PID", pid, "/F"], capture_output=True)
    else:
        out = subprocess.run(["lsof", "-t", f"-i:{port}"], capture_output=True, text=True).stdout
        for pid in out.split():
            echo(f"Killing PID {pid} on port {port}")
            subprocess.run(["kill", "-9", pid], capture_output=True)

def check_port_free(host: str, port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.settimeout(0.5)
        return s.connect_ex((host, port)) != 0

def wait_for_api(url: str, timeout: float = 60.0) -> bool:
    import requests
    start = time.time()
    while time.time() - start < timeout:
        try:
            if requests.get(url, timeout=2).status_code == 200:
                return True
        except requests.RequestException:
            pass
        time.sleep(0.4)
    return False

def validate_registry():
    """Build the calculator catalog once in-process; a bad record fails fast here."""
    sys.path[:0] = [p for p in PYTHONPATH_APPEND.split(os.pathsep) if p not in sys.path]
    try:
        from crunchem.catalog import CatalogError, get_catalog
    except ImportError as e:
        fail(f"Cannot import crunchem: {e}")
    try:
        catalog = get_catalog()
    except CatalogError as e:
        fail(f"Calculator registry is invalid:\n{e}")
    counts = {k: n for k, n in catalog.category_counts().items() if n}
    echo(f"✅ Registry OK: {len(catalog.calculators)} calculators "
         + ", ".join(f"{k}={n}" for k, n in counts.items()))

def load_dotenv_if_present():
    from dotenv import load_dotenv
    env_path = PROJECT_ROOT / ".env"
    if env_path.exists():
        load_dotenv(env_path)
        echo("Loaded .env file")

def ensure_env():
    # prefer a client-connectable API_URL
    bind_host = os.getenv("API_HOST", API_HOST)
    bind_port = int(os.getenv("API_PORT", API_PORT))
    os.environ.setdefault("API_URL", f"http://{probe_host(bind_host)}:{bind_port}")
    os.environ.setdefault("PREFERENCES_PATH", str(PROJECT_ROOT / ".crunchem" / "preferences.json"))
    os.environ.setdefault("LOG_LEVEL", "INFO")

def which_or_fail(pkg: str, hint: str):
    try:
        __import__(pkg)
    except ImportError:
        fail(f"{pkg} missing → {hint}")

def relay(name: str, proc: subprocess.Popen | None, limit: int = 20):
    if proc and proc.stdout:
        for _ in range(limit):
            line = proc.stdout.readline()
            if not line:
                break
            print(f"[{name}] {line}", end="")

# ---------------------- STARTERS ----------------------
def start_uvicorn(host: str, port: int) -> subprocess.Popen:
    env = os.environ.copy()
    env["PYTHONPATH"] = (env.get("PYTHONPATH", "") + os.pathsep + PYTHONPATH_APPEND).strip(os.pathsep)
    cmd = [sys.executable, "-m", "uvicorn", API_APP, "--host", host, "--port", str(port), "--reload",
           "--log-level", os.environ["LOG_LEVEL"].lower()]
    echo(f"▶ Starting API → {' '.join(cmd)}")
    return subprocess.Popen(cmd, cwd=str(PROJECT_ROOT), env=env, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True)

def start_streamlit() -> subprocess.Popen:
    """Launch Streamlit UI on the configured port."""
    env = os.environ.copy()
    env.setdefault("STREAMLIT_SERVER_ADDRESS", "0.0.0.0")
    env.setdefault("STREAMLIT_SERVER_HEADLESS", "true")
    env.setdefault("STREAMLIT_BROWSER_GATHER_USAGE_STATS", "false")

    cmd = [
        sys.executable, "-m", "streamlit", "run", str(UI_FILE),
        "--server.port", str(UI_PORT),
        "--server.address", env["STREAMLIT_SERVER_ADDRESS"],
        "--server.headless", env["STREAMLIT_SERVER_HEADLESS"]
    ]
    echo(f"▶ Starting UI → {' '.join(cmd)}")
    return subprocess.Popen(
        cmd, cwd=str(PROJECT_ROOT), env=env,
        stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True
    )


# ---------------------- MAIN ----------------------
def main():
    echo("🚀 Launching Crunchem Dev Environment...")

    which_or_fail("dotenv",    "pip install python-dotenv")
    load_dotenv_if_present()
    ensure_env()

    # Resolve env *after* .env load
    bind_host = os.getenv("API_HOST", API_HOST)
    bind_port = int(os.getenv("API_PORT", API_PORT))
    health_url = f"http://{probe_host(bind_host)}:{bind_port}/health"

    # Deps
    which_or_fail("uvicorn",   "pip install uvicorn[standard]")
    which_or_fail("streamlit", "pip install streamlit")
    which_or_fail("requests",  "pip install requests")

    echo("Validating calculator registry ...")
    validate_registry()

    # Fresh ports
    kill_port(bind_port)
    kill_port(UI_PORT)
    if not check_port_free(probe_host(bind_host), bind_port): fail(f"Port {bind_port} still in use after cleanup.")
    if not check_port_free(probe_host(bind_host), UI_PORT):  fail(f"Port {UI_PORT} still in use after cleanup.")

    api = start_uvicorn(bind_host, bind_port)
    ui = None

    def cleanup():
        for proc in (ui, api):
            if proc and proc.poll() is None:
                proc.terminate()
                time.sleep(0.5)
                if proc.poll() is None:
                    proc.kill()
    atexit.register(cleanup)

    echo("⌛ Waiting for API /health ...")
    if not wait_for_api(health_url, timeout=60):
        echo("Last API logs:")
        relay("API", api)
        fail("API failed to become ready in time.")
    echo("✅ API ready")

    ui = start_streamlit()
    echo("⌛ Waiting for Streamlit to emit 'Running on' ...")
    deadline = time.time() + 45
    ok = False
    while ui.stdout and time.time() < deadline:
        line = ui.stdout.readline()
        if line:
            print(f"[UI] {line}", end="")
            if "Running on" in line or "Network URL" in line:
                ok = True
                break
        else:
            time.sleep(0.2)
    if not ok:
        echo("⚠️ Streamlit didn't confirm in time; check logs above.")

    echo(f"🌐 UI running at: http://localhost:{UI_PORT}")
    echo(f"📘 API docs: http://localhost:{bind_port}/docs")

    try:
        while api.poll() is None and ui.poll() is None:
            relay("API", api, limit=1)
            relay("UI", ui, limit=1)
            time.sleep(0.2)
    except KeyboardInterrupt:
        echo("🛑 Ctrl+C pressed, shutting down...")
    finally:
        cleanup()
        echo("✅ All processes stopped cleanly.")

if __name__ == "__main__":
    main()
