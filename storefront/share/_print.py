"""
Print view — standalone RTL HTML bill for an order.
"""

from __future__ import annotations

from html import escape

from storefront.checkout import OrderRecord
from storefront.pricing import CURRENCY, format_number
from storefront.share._message import SHOP_NAME, DATE_FORMAT, TIME_FORMAT

SUPPORT_PHONE = "۰۷۸۹۲۸۱۷۷۰"

_STYLE = """
body { font-family: Tahoma, Arial, sans-serif; direction: rtl; text-align: right;
       padding: 20px; max-width: 800px; margin: 0 auto; }
.bill-header { text-align: center; margin-bottom: 20px; border-bottom: 2px solid #333; padding-bottom: 15px; }
.bill-table { width: 100%; border-collapse: collapse; margin: 20px 0; }
.bill-table th, .bill-table td { border: 1px solid #333; padding: 8px; text-align: center; }
.bill-table th { background-color: #f2f2f2; font-weight: bold; }
.customer-info { background-color: #f9f9f9; padding: 15px; border-radius: 5px; margin-bottom: 20px; }
@media print { body { padding: 0; } }
"""


def _rows(order: OrderRecord) -> str:
    return "\n".join(
        "<tr>"
        f"<td>{n}</td>"
        f"<td>{escape(line.name)}</td>"
        f"<td>{line.quantity}</td>"
        f"<td>{format_number(line.unit_price)}</td>"
        f"<td>{format_number(line.line_total)} {CURRENCY}</td>"
        "</tr>"
        for n, line in enumerate(order.lines, start=1)
    )


def render_print_view(order: OrderRecord) -> str:
    c = order.customer
    return f"""<!DOCTYPE html>
<html lang="fa" dir="rtl">
<head>
<meta charset="UTF-8">
<title>پرنت بل خرید - {SHOP_NAME}</title>
<style>{_STYLE}</style>
</head>
<body>
<div class="bill-header">
<h2>{SHOP_NAME}</h2>
<h3>بل خرید</h3>
<p>تاریخ: {order.created_at.strftime(DATE_FORMAT)}</p>
<p>زمان: {order.created_at.strftime(TIME_FORMAT)}</p>
</div>
<div class="customer-info">
<h4>اطلاعات مشتری</h4>
<p><span>نام:</span> <span>{escape(c.name)}</span></p>
<p><span>شماره تماس:</span> <span>{escape(c.phone)}</span></p>
<p><span>آدرس:</span> <span>{escape(c.address)}</span></p>
</div>
<table class="bill-table">
<thead><tr><th>#</th><th>جنس</th><th>تعداد</th><th>قیمت واحد</th><th>مجموع</th></tr></thead>
<tbody>
{_rows(order)}
</tbody>
<tfoot><tr><td colspan="4">مجموع کل:</td><td>{format_number(order.total)} {CURRENCY}</td></tr></tfoot>
</table>
<div class="bill-footer">
<p>تشکر از خرید شما</p>
<p>برای پیگیری سفارش با شماره {SUPPORT_PHONE} تماس بگیرید</p>
<p class="bill-serial">شماره بل: {escape(order.serial)}</p>
</div>
</body>
</html>
"""


__all__ = ("SUPPORT_PHONE", "render_print_view")
