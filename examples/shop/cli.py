"""
Interactive CLI — stands in for the product grid, cart panel and bill.

┌─────────────────────────────────────────────────────────────────────────┐
│  COMMAND      TOUCHES                                                   │
├─────────────────────────────────────────────────────────────────────────┤
│  list/search  SearchIndex only                                          │
│  add/set/rm   CartLedger (checks live stock)                            │
│  checkout     CustomerForm → CheckoutFinalizer (decrements stock)       │
│  share/print  last OrderRecord                                          │
└─────────────────────────────────────────────────────────────────────────┘
"""

from kungfu import Ok, Error, Result

from storefront import Storefront
from storefront.catalog import Product, placeholder_for
from storefront.checkout import (
    CustomerInfo,
    Cancelled,
    InsufficientStock,
    EmptyCart,
)
from storefront.pricing import format_price, format_number, CURRENCY


# ═══════════════════════════════════════════════════════════════════════════════
# Help
# ═══════════════════════════════════════════════════════════════════════════════

HELP_TEXT = """
┌─────────────────────────────────────────────────────────────────────────────┐
│                              COMMANDS                                        │
├─────────────────────────────────────────────────────────────────────────────┤
│  list                       Show the current page                           │
│  next / prev / page <n>     Move between pages                              │
│  search <text>              Search in the active category                   │
│  category <name|all>        Filter by category                              │
│  categories                 List categories                                 │
│  reset                      Clear search and filter                         │
├─────────────────────────────────────────────────────────────────────────────┤
│  add <n> [qty]              Add product #n of the page to the cart          │
│  set <n> <qty>              Set quantity (0 removes)                        │
│  rm <n>                     Remove from cart                                │
│  cart                       Show the cart                                   │
│  clear                      Empty the cart                                  │
├─────────────────────────────────────────────────────────────────────────────┤
│  checkout                   Enter details and place the order               │
│  share                      Messaging link for the last order               │
│  print                      HTML bill for the last order                    │
│  refresh                    Reload the catalog                              │
│  help / quit                                                                │
└─────────────────────────────────────────────────────────────────────────────┘
"""


def print_help() -> None:
    print(HELP_TEXT)


# ═══════════════════════════════════════════════════════════════════════════════
# Display
# ═══════════════════════════════════════════════════════════════════════════════

def print_page(shop: Storefront) -> None:
    index = shop.search
    page = index.paginate()
    total = len(index.results)
    if not total:
        print("\n  هیچ محصولی یافت نشد")
        return

    print(f"\n  {total} products · page {index.page}/{index.total_pages()} · category: {index.category}")
    print("  " + "─" * 70)
    for n, p in enumerate(page, start=1):
        available = shop.cart.available(p.id)
        badge = "ناموجود" if p.stock == 0 else f"{available} left"
        print(f"  [{n:2}] {placeholder_for(p.category)} {p.name:28} {format_price(p.price):>16}  {badge}")


def print_categories(shop: Storefront) -> None:
    print()
    for category in shop.catalog.categories():
        print(f"  {placeholder_for(category)} {category}")


def print_cart(shop: Storefront) -> None:
    cart = shop.cart
    if cart.is_empty:
        print("\n  سبد خرید خالی است")
        return

    print("\n┌────────────────────────────────────────────────┐")
    print("│  CART                                           │")
    print("├────────────────────────────────────────────────┤")
    for line in cart.lines:
        print(f"│  {line.quantity}x {line.name:24} {format_number(line.line_total):>10} │")
    print("├────────────────────────────────────────────────┤")
    print(f"│  {cart.item_count()} items   TOTAL: {format_number(cart.total())} {CURRENCY}")
    print("└────────────────────────────────────────────────┘")


# ═══════════════════════════════════════════════════════════════════════════════
# Customer form
# ═══════════════════════════════════════════════════════════════════════════════

def _ask(label: str, default: str) -> str | None:
    hint = f" [{default}]" if default else ""
    try:
        answer = input(f"  {label}{hint}: ")
    except (EOFError, KeyboardInterrupt):
        return None
    return answer or default


def terminal_form(defaults: CustomerInfo) -> Result[CustomerInfo, Cancelled]:
    """Ask name, phone, address. Ctrl-D at any prompt cancels."""
    name = _ask("نام", defaults.name)
    if name is None:
        return Error(Cancelled())
    phone = _ask("شماره تماس", defaults.phone)
    if phone is None:
        return Error(Cancelled())
    address = _ask("آدرس", defaults.address)
    if address is None:
        return Error(Cancelled())
    return Ok(CustomerInfo.of(name, phone, address))


# ═══════════════════════════════════════════════════════════════════════════════
# Commands
# ═══════════════════════════════════════════════════════════════════════════════

def pick(shop: Storefront, ref: str) -> Product | None:
    """Product by its number on the current page, or by id."""
    page = shop.search.paginate()
    if ref.isdigit() and 1 <= int(ref) <= len(page):
        return page[int(ref) - 1]
    product = shop.catalog.get_by_id(ref)
    if product is None:
        print(f"  ✗ No product {ref}")
    return product


def cmd_add(shop: Storefront, ref: str, qty: int) -> None:
    product = pick(shop, ref)
    if product is None:
        return
    if shop.cart.add_to_cart(product.id, qty):
        print(f"  ✓ {product.name} × {qty} added")
    else:
        print(f"  ✗ موجودی کافی نیست (only {shop.cart.available(product.id)} left)")


def cmd_set(shop: Storefront, ref: str, qty: int) -> None:
    product = pick(shop, ref)
    if product is None:
        return
    if shop.cart.update_quantity(product.id, qty):
        print(f"  ✓ {product.name}: {shop.cart.quantity_of(product.id)}")
    elif not shop.cart.quantity_of(product.id):
        print("  ✗ Not in cart, use add")
    else:
        print(f"  ✗ Only {product.stock} in stock")


def cmd_remove(shop: Storefront, ref: str) -> None:
    product = pick(shop, ref)
    if product is None:
        return
    if shop.cart.remove_from_cart(product.id):
        print(f"  ✓ {product.name} removed")
    else:
        print("  ✗ Not in cart")


def cmd_checkout(shop: Storefront) -> None:
    match shop.checkout(terminal_form):
        case Ok(order):
            print(f"""
╔════════════════════════════════════════════════╗
║  BILL {order.serial:40} ║
╠════════════════════════════════════════════════╣
║  {order.customer.name:20} {order.customer.phone:25} ║""")
            for line in order.lines:
                print(f"║    {line.quantity}x {line.name:24} {format_number(line.line_total):>12} ║")
            print(f"""╠════════════════════════════════════════════════╣
║  TOTAL: {format_number(order.total):>20} {CURRENCY:17} ║
╚════════════════════════════════════════════════╝

  ✓ سفارش شما با موفقیت ثبت شد! Use 'share' to send it.
""")
        case Error(Cancelled()):
            print("  · Checkout cancelled")
        case Error(EmptyCart()):
            print("  ✗ سبد خرید شما خالی است!")
        case Error(InsufficientStock(names)):
            print("  ✗ موجودی کافی برای محصولات زیر وجود ندارد:")
            for name in names:
                print(f"    • {name}")


def cmd_share(shop: Storefront) -> None:
    link = shop.share_link()
    print(f"\n  {link}" if link else "  ✗ ابتدا باید بل خرید ایجاد شود.")


def cmd_print(shop: Storefront) -> None:
    html = shop.print_view()
    print(html if html else "  ✗ ابتدا باید بل خرید ایجاد شود.")


async def cmd_refresh(shop: Storefront) -> bool:
    match await shop.refresh():
        case Ok(products):
            note = " (offline copy)" if shop.catalog.from_cache else ""
            print(f"  ✓ {len(products)} products loaded{note}")
            return True
        case Error(e):
            print(f"  ✗ خطا در بارگیری محصولات: {e.message}")
            print("    Type 'refresh' to try again.")
            return False


# ═══════════════════════════════════════════════════════════════════════════════
# Main Loop
# ═══════════════════════════════════════════════════════════════════════════════

BANNER = """
╔════════════════════════════════════════════════════════════════════════════╗
║                         فروشگاه آنلاین AYM                                  ║
╠════════════════════════════════════════════════════════════════════════════╣
║  Browse, fill the cart, check out. Stock is checked on every change and    ║
║  once more, for the whole cart, at checkout.                               ║
╚════════════════════════════════════════════════════════════════════════════╝
"""


def _int(value: str, default: int | None = None) -> int | None:
    try:
        return int(value)
    except ValueError:
        return default


async def run_cli(shop: Storefront) -> None:
    print(BANNER)
    if await cmd_refresh(shop):
        print_page(shop)
    print_help()

    while True:
        try:
            line = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if not line:
            continue

        parts = line.split(maxsplit=1)
        cmd, rest = parts[0].lower(), (parts[1] if len(parts) > 1 else "")
        args = rest.split()

        match cmd:
            case "quit" | "exit" | "q":
                print("Bye!")
                break

            case "help" | "h" | "?":
                print_help()

            case "list" | "ls":
                print_page(shop)

            case "next":
                shop.search.next_page()
                print_page(shop)

            case "prev":
                shop.search.previous_page()
                print_page(shop)

            case "page":
                shop.search.go_to(_int(rest, 1) or 1)
                print_page(shop)

            case "search":
                shop.search.search(rest)
                print_page(shop)

            case "category":
                shop.search.search(shop.search.query, rest or "all")
                print_page(shop)

            case "categories":
                print_categories(shop)

            case "reset":
                shop.search.reset()
                print_page(shop)

            case "add":
                if not args:
                    print("  Usage: add <n> [qty]")
                    continue
                qty = _int(args[1]) if len(args) > 1 else 1
                if qty is None:
                    print("  ✗ qty must be a number")
                    continue
                cmd_add(shop, args[0], qty)

            case "set":
                if len(args) != 2 or _int(args[1]) is None:
                    print("  Usage: set <n> <qty>")
                    continue
                cmd_set(shop, args[0], int(args[1]))

            case "rm" | "remove":
                if len(args) != 1:
                    print("  Usage: rm <n>")
                    continue
                cmd_remove(shop, args[0])

            case "cart":
                print_cart(shop)

            case "clear":
                shop.cart.clear()
                print("  ✓ Cart cleared")

            case "checkout":
                cmd_checkout(shop)

            case "share":
                cmd_share(shop)

            case "print":
                cmd_print(shop)

            case "refresh":
                await cmd_refresh(shop)

            case _:
                print(f"  ✗ Unknown command: {cmd}")
                print("  Type 'help' for available commands.")
