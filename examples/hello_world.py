"""
policy_store — Hello World

Every field carries a permission. Paths walk nested stores,
and every segment is checked before any data is touched.
"""

import itertools

from policy_store import PermissionDeniedError, Store, Undefined
from policy_store.config import load_store

# ─── A store type with a static permission table ───


class Account(Store, permissions={"password": "w", "id": "r", "audit": "none"}):
    def __init__(self, account_id: str) -> None:
        super().__init__()
        logins = itertools.count(1)
        self.declare("id", account_id)
        self.declare("password", "")
        self.declare("audit", [])
        self.declare("session", lambda: f"session-{next(logins)}")


def main():
    # ──────────────────────────────────────
    #  1. Nested writes create stores on the way
    # ──────────────────────────────────────
    root = Store()
    root.write("user:profile:email", "alice@acme.com")
    root.write("user:settings", {"theme": "dark", "langs": ["en", "pt"]})

    print("email:   ", root.read("user:profile:email"))
    print("theme:   ", root.read("user:settings:theme"))
    print("langs:   ", root.read("user:settings:langs"))
    print("missing: ", root.read("user:billing:plan") is Undefined)

    # ──────────────────────────────────────
    #  2. Field permissions
    # ──────────────────────────────────────
    account = Account("acc-42")
    root.write("account", account)

    account.write("password", "s3cret")
    print("id:      ", root.read("account:id"))
    print("session: ", root.read("account:session"))
    print("session: ", root.read("account:session"))

    for path in ("account:password", "account:audit"):
        try:
            root.read(path)
        except PermissionDeniedError as e:
            print(f"  [DENIED] {e}")

    try:
        root.write("account:id", "acc-43")
    except PermissionDeniedError as e:
        print(f"  [DENIED] {e}")

    print("snapshot:", account.entries())
    print("policy:  ", account.export())

    # ──────────────────────────────────────
    #  3. Stores from configuration
    # ──────────────────────────────────────
    app = load_store(
        {
            "name": "app",
            "default_policy": "r",
            "permissions": {"feature_flags": "rw"},
        }
    )
    app.write("feature_flags:beta", True)
    print("beta:    ", app.read("feature_flags:beta"))
    try:
        app.write("version", "2.0")
    except PermissionDeniedError as e:
        print(f"  [DENIED] {e}")


if __name__ == "__main__":
    main()
