from __future__ import annotations

import getpass
import logging
import sys

from wms_client_sdk import ConfigError

from wms_app.app.bootstrap import WmsBootstrap
from wms_app.app.state import Route


def _print_summaries(bootstrap: WmsBootstrap) -> None:
    shell = bootstrap.shell
    if shell is None:
        return
    inventory = shell.inventory.summary()
    print(
        f"Inventory: {inventory['total_units']} units across {inventory['unique_skus']} SKUs "
        f"({inventory['low_stock']} low, {inventory['out_of_stock']} out of stock)"
    )
    shell.activate("orders")
    orders = shell.orders.render()["summary"]
    print(
        f"Orders: {orders['total_orders']} total, {orders['pending']} pending, "
        f"{orders['shipped']} shipped, {orders['total_value']} value"
    )
    if shell.banner.visible:
        print(shell.banner.message)


def run() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    try:
        bootstrap = WmsBootstrap()
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    result = bootstrap.start()
    if result.route is Route.LOGIN:
        if not sys.stdin.isatty():
            print("Dream World WMS: login required.")
            return 1
        print(bootstrap.login_view.render_message())
        username = input("Username: ")
        password = getpass.getpass("Password: ")
        result = bootstrap.login(username, password)
        if result.route is Route.LOGIN:
            print(result.error_message, file=sys.stderr)
            return 1

    print(f"Dream World WMS loaded for {bootstrap.state.username}.")
    _print_summaries(bootstrap)
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
