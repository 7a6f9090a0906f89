"""
Pre-Deploy and Smoke Test Script.

Validates a running deployment and executes a smoke test over HTTP:
1. Health Check
2. Brand -> Truck -> Mechanic -> Repair flow
3. Repair counter and delete guard verification
4. Cleanup
"""

import os
import sys
import uuid
import requests

BASE_URL = os.getenv("BASE_URL", "http://127.0.0.1:8000")
TIMEOUT = 10

def print_step(step, msg):
    print(f"[{step}] {msg}")

def fail(msg):
    print(f"❌ FAILURE: {msg}")
    sys.exit(1)

def success(msg):
    print(f"✅ {msg}")

def call(method, path, expected, **kwargs):
    try:
        res = requests.request(method, f"{BASE_URL}{path}", timeout=TIMEOUT, **kwargs)
    except requests.RequestException as e:
        fail(f"{method} {path} died: {e}")
    if res.status_code != expected:
        fail(f"{method} {path} returned {res.status_code}: {res.text}")
    return res.json() if res.content else None

def main():
    print("🚀 Starting Deployment Validation...")
    tag = uuid.uuid4().hex[:8]

    # 1. Health Check
    print_step("PRE-DEPLOY", "Checking /health...")
    health = call("GET", "/health", 200)
    success(f"Health: {health}")

    # 2. Smoke Test: Repair Flow
    print_step("SMOKE", "Running Brand -> Truck -> Repair flow...")
    brand = call("POST", "/brand", 201, json={"name": f"smoke-{tag}"})
    truck = call("POST", "/truck", 201, json={
        "brandId": brand["id"], "load": 1, "capacity": 1, "year": 2024
    })
    mechanic = call("POST", "/employee", 201, json={
        "role": "Mechanic", "name": "Smoke", "surname": tag, "seniorityLevel": "entry"
    })
    repair = call("POST", "/repair", 201, json={
        "truckId": truck["id"], "mechanicId": mechanic["id"],
        "orderDate": "2024-01-01T00:00:00", "daysToRepair": 1
    })
    success(f"Repair {repair['id']} recorded")

    # 3. Verify
    print_step("VERIFY", "Checking repair counter...")
    if call("GET", f"/truck/{truck['id']}", 200)["numberOfRepairs"] != 1:
        fail("Truck repair counter was not incremented")
    success("Repair counter incremented")

    print_step("VERIFY", "Checking delete guards...")
    blocked = requests.delete(f"{BASE_URL}/brand/{brand['id']}", timeout=TIMEOUT)
    if blocked.status_code != 400:
        fail(f"Brand with trucks was not protected: {blocked.status_code}")
    success(f"Guard: {blocked.json()['error']}")

    # 4. Cleanup
    print_step("CLEANUP", "Removing smoke data...")
    call("DELETE", f"/repair/{repair['id']}", 204)
    if call("GET", f"/truck/{truck['id']}", 200)["numberOfRepairs"] != 0:
        fail("Truck repair counter was not decremented")
    call("DELETE", f"/truck/{truck['id']}", 204)
    call("DELETE", f"/employee/{mechanic['id']}", 204)
    call("DELETE", f"/brand/{brand['id']}", 204)
    success("Smoke data removed")

    print("\n🎉 Deployment validated")

if __name__ == "__main__":
    main()
