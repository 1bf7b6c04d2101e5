"""Printable picking ticket for a single order.

``to_html`` produces a standalone page; the browser's own print dialog does
the printing, so nothing here talks to a printer.
"""

from __future__ import annotations

import html
import logging
import tempfile
import webbrowser
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from wms_app.config import DEFAULT_COMPANY_ADDRESS, DEFAULT_COMPANY_NAME
from wms_client_sdk.models import Order, as_local

logger = logging.getLogger(__name__)

_COLUMNS = ("Bin", "LN#", "SKU", "Description", "Size", "O-QTY", "S-QTY")


def pick_ticket_number(order_id: str) -> str:
    return order_id.replace("ORD-", "PICK-", 1)


def _cell(value: Any) -> str:
    return html.escape("" if value is None else str(value))


@dataclass
class PackingSlip:
    order: Order
    company_name: str = DEFAULT_COMPANY_NAME
    company_address: str = DEFAULT_COMPANY_ADDRESS

    def render(self) -> dict[str, Any]:
        order = self.order
        party = {"name": order.customer, "address": order.address}
        return {
            "company": {"name": self.company_name, "address": self.company_address},
            "pick_ticket": pick_ticket_number(order.order_id),
            "order_number": order.order_id,
            "date": as_local(order.timestamp).date().isoformat(),
            "sold_to": {**party, "phone": order.customer_phone},
            "ship_to": party,
            "ship_via": order.carrier or "N/A",
            "subtotal": str(order.subtotal),
            "lines": [
                {
                    "line_number": index,
                    "bin": line.bin,
                    "sku": line.sku,
                    "description": line.item_desc,
                    "size": line.item_type,
                    "ordered_qty": line.qty,
                    "shipped_qty": "",
                }
                for index, line in enumerate(order.item_list, start=1)
            ],
        }

    def to_html(self) -> str:
        slip = self.render()
        rows = [
            "      <tr>"
            + "".join(
                f"<td>{_cell(line[key])}</td>"
                for key in ("bin", "line_number", "sku", "description", "size", "ordered_qty", "shipped_qty")
            )
            + "</tr>"
            for line in slip["lines"]
        ]
        sold_to, ship_to = slip["sold_to"], slip["ship_to"]
        return "\n".join(
            [
                "<!DOCTYPE html>",
                "<html>",
                "<head>",
                '  <meta charset="utf-8">',
                f"  <title>Order Slip - {_cell(slip['order_number'])}</title>",
                "  <style>",
                "    body { font-family: Arial, sans-serif; }",
                "    table { width: 100%; border-collapse: collapse; }",
                "    th, td { border: 1px solid #ccc; padding: 4px 8px; }",
                "    @media print { .no-print { display: none; } }",
                "  </style>",
                "</head>",
                "<body>",
                f"  <h1>{_cell(slip['company']['name'])}</h1>",
                f"  <p>{_cell(slip['company']['address'])}</p>",
                "  <h2>Picking Ticket</h2>",
                f"  <p><strong>Pick Ticket #:</strong> {_cell(slip['pick_ticket'])}</p>",
                f"  <p><strong>Order Number:</strong> {_cell(slip['order_number'])}</p>",
                f"  <p><strong>Date:</strong> {_cell(slip['date'])}</p>",
                "  <h3>Sold To:</h3>",
                f"  <p>{_cell(sold_to['name'])}</p>",
                f"  <p>{_cell(sold_to['address'])}</p>",
                f"  <p>{_cell(sold_to['phone'])}</p>",
                "  <h3>Ship To:</h3>",
                f"  <p>{_cell(ship_to['name'])}</p>",
                f"  <p>{_cell(ship_to['address'])}</p>",
                "  <p><strong>PO:</strong> N/A <strong>Terms:</strong> N/A "
                f"<strong>Ship Via:</strong> {_cell(slip['ship_via'])} "
                f"<strong>SubTotal:</strong> ${_cell(slip['subtotal'])}</p>",
                "  <table>",
                "    <thead>",
                "      <tr>" + "".join(f"<th>{column}</th>" for column in _COLUMNS) + "</tr>",
                "    </thead>",
                "    <tbody>",
                *rows,
                "    </tbody>",
                "  </table>",
                '  <div class="no-print"><button onclick="window.print()">Print</button></div>',
                "</body>",
                "</html>",
            ]
        )

    def open_print_view(self, directory: Path | None = None) -> Path:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            prefix=f"{pick_ticket_number(self.order.order_id)}-",
            suffix=".html",
            dir=directory,
            delete=False,
        ) as handle:
            handle.write(self.to_html())
            path = Path(handle.name)
        if not webbrowser.open(path.as_uri()):
            logger.warning("print_view_not_opened", extra={"order_id": self.order.order_id, "path": str(path)})
        return path
