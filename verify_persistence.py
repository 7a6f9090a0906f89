"""
Persistence check against a real database.

Starts the API, records a repair, restarts the API and confirms the truck's
repair counter and the repair survived the restart.
"""

import time
import subprocess
import httpx
import sys
import os
import signal

BASE_URL = "http://127.0.0.1:8000"
API_PREFIX = os.getenv("API_PREFIX", "")

def wait_for_server(retries=10, delay=2):
    url = f"{BASE_URL}/health"
    print(f"Waiting for server at {url}...")
    for i in range(retries):
        try:
            resp = httpx.get(url)
            if resp.status_code == 200:
                print("✅ Server is up!")
                return True
        except httpx.TransportError:
            pass
        time.sleep(delay)
    print("❌ Server failed to start.")
    return False

def start_server(echo=False):
    env = {**os.environ, "DB_ECHO": "True"} if echo else None
    return subprocess.Popen(
        [sys.executable, "-m", "uvicorn", "backend.app.main:app", "--host", "127.0.0.1", "--port", "8000"],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        env=env
    )

def stop_server(proc):
    proc.send_signal(signal.SIGTERM)
    proc.wait()

def expect(resp, status_code, what):
    if resp.status_code != status_code:
        print(f"❌ {what} failed: {resp.status_code} {resp.text}")
        raise RuntimeError(f"{what} failed")
    print(f"✅ {what}")
    return resp.json() if resp.content else None

def run_verification():
    api = f"{BASE_URL}{API_PREFIX}"

    # 1. Start Server (First Run)
    print("\n--- [Step 1] Starting Server (Initial) ---")
    proc = start_server(echo=True)
    
    try:
        if not wait_for_server():
            server_logs = proc.communicate(timeout=2)
            print("Server Stdout:", server_logs[0].decode())
            print("Server Stderr:", server_logs[1].decode())
            raise RuntimeError("Server start failed")

        # 2. Record a repair
        print("\n--- [Step 2] Recording Repair (Persistence Test) ---")
        brand = expect(httpx.post(f"{api}/brand", json={"name": "Persist Brand"}), 201, "Brand created")
        truck = expect(httpx.post(f"{api}/truck", json={
            "brandId": brand["id"], "load": 1000, "capacity": 2000, "year": 2020
        }), 201, "Truck created")
        mechanic = expect(httpx.post(f"{api}/employee", json={
            "role": "Mechanic", "name": "Persist", "surname": "Mechanic", "seniorityLevel": "mid"
        }), 201, "Mechanic created")
        repair = expect(httpx.post(f"{api}/repair", json={
            "truckId": truck["id"], "mechanicId": mechanic["id"],
            "orderDate": "2024-01-01T00:00:00", "daysToRepair": 3
        }), 201, "Repair created")
        print(f"Truck {truck['id']} numberOfRepairs = {repair['truck']['numberOfRepairs']}")

    finally:
        print("\n--- [Step 3] Stopping Server ---")
        stop_server(proc)
    
    time.sleep(2) # Wait for port release

    # 3. Restart Server
    print("\n--- [Step 4] Restarting Server (Verification) ---")
    proc2 = start_server()

    try:
        if not wait_for_server():
            raise RuntimeError("Server restart failed")

        print("\n--- [Step 5] Reading Back (Post-Restart) ---")
        persisted = expect(httpx.get(f"{api}/truck/{truck['id']}"), 200, "Truck read back")
        if persisted["numberOfRepairs"] != 1 or [r["id"] for r in persisted["repairs"]] != [repair["id"]]:
            print(f"❌ Counter or repairs not persisted: {persisted}")
            raise RuntimeError("Repair not persisted")
        print("✅ Repair and counter persisted")

        print("\n--- [Step 6] Cleaning Up ---")
        expect(httpx.delete(f"{api}/repair/{repair['id']}"), 204, "Repair deleted")
        expect(httpx.delete(f"{api}/truck/{truck['id']}"), 204, "Truck deleted")
        expect(httpx.delete(f"{api}/employee/{mechanic['id']}"), 204, "Mechanic deleted")
        expect(httpx.delete(f"{api}/brand/{brand['id']}"), 204, "Brand deleted")

    finally:
        print("\n--- [Step 7] Stopping Server ---")
        stop_server(proc2)

if __name__ == "__main__":
    run_verification()
