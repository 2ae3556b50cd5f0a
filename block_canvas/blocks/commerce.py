"""
Blocs commerce : payment, product, shop.

Vitrine uniquement : aucun paiement n'est traité, les boutons mènent à
`checkoutUrl` quand il est renseigné.
"""
from decimal import Decimal, InvalidOperation

from ..core.schemas import Block, PageTheme, ResolvedStyle
from .base import class_attr, empty_placeholder, esc, img, is_inert_url, items, style_attr, surface_pairs, text

CURRENCY_SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£", "JPY": "¥", "INR": "₹", "AUD": "A$", "CAD": "C$"}
ZERO_DECIMAL = {"JPY"}


def format_price(amount, currency: str = "USD") -> str:
    """12 → '$12.00' ; devise sans symbole connu → '12.00 CHF'."""
    try:
        value = Decimal(str(amount if amount not in (None, "") else 0))
    except InvalidOperation:
        return str(amount)
    currency = (currency or "USD").upper()
    digits = "{:,.0f}" if currency in ZERO_DECIMAL else "{:,.2f}"
    formatted = digits.format(value)
    symbol = CURRENCY_SYMBOLS.get(currency)
    if symbol is None:
        return f"{formatted} {currency}"
    if formatted.startswith("-"):
        return f"-{symbol}{formatted[1:]}"
    return f"{symbol}{formatted}"


def _buy_button(label: str, url, style: ResolvedStyle) -> str:
    href = "#" if is_inert_url(url) else url
    return (
        f'<a href="{esc(href)}" class="commerce__buy bc-hoverable"{style_attr(*surface_pairs(style))}>'
        f"{esc(label)}</a>"
    )


# ── Payment (pourboire / don) ────────────────────────────────────────────────

def render_payment(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    currency = c.get("currency") or "USD"
    amounts = [a for a in c.get("amounts") or [] if isinstance(a, (int, float)) and not isinstance(a, bool) and a > 0]
    chips = "".join(
        f'<button type="button" class="payment__amount" data-amount="{a}"'
        f'{style_attr(("border-color", style.accent_color), ("color", style.accent_color))}>'
        f"{esc(format_price(a, currency))}</button>"
        for a in amounts
    )
    custom = ""
    if c.get("allowCustom", True):
        custom = '<input type="number" class="payment__custom" min="1" step="1" placeholder="Custom amount">'
    desc = f'<p class="payment__desc">{esc(c["description"])}</p>' if c.get("description") else ""
    return f"""<section class="payment"{style_attr(("text-align", style.alignment))}>
  <h3 class="payment__title"{style_attr(("font-family", style.title_font), ("color", style.title_color))}>{text(c, "title", "Support my work")}</h3>
  {desc}
  <div class="payment__amounts">{chips}</div>
  {custom}
  {_buy_button(c.get("buttonLabel") or "Send", c.get("checkoutUrl"), style)}
</section>"""


# ── Product ──────────────────────────────────────────────────────────────────

def _product_card(product: dict, currency: str, style: ResolvedStyle) -> str:
    name = product.get("name") or "Product"
    image = img(product.get("image"), alt=name, css_class="product__image")
    compare = ""
    if product.get("compareAtPrice"):
        compare = f'<s class="product__compare">{esc(format_price(product["compareAtPrice"], currency))}</s>'
    desc = f'<p class="product__desc">{esc(product["description"])}</p>' if product.get("description") else ""
    sold_out = product.get("inStock") is False
    button = (
        '<span class="product__sold-out">Sold out</span>' if sold_out
        else _buy_button(product.get("buttonLabel") or "Buy now", product.get("checkoutUrl") or product.get("url"), style)
    )
    return f"""<div{class_attr("product", "product--sold-out" if sold_out else None)}>
    {image}
    <div class="product__body">
      <h4 class="product__name"{style_attr(("color", style.title_color))}>{esc(name)}</h4>
      <p class="product__price"><strong>{esc(format_price(product.get("price"), currency))}</strong>{compare}</p>
      {desc}
      {button}
    </div>
  </div>"""


def render_product(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    return _product_card(c, c.get("currency") or "USD", style)


def render_shop(block: Block, style: ResolvedStyle, theme: PageTheme) -> str:
    c = block.content
    products = items(c, "products")
    if not products:
        return empty_placeholder("Your shop is empty", "Add products to start selling")
    currency = c.get("currency") or "USD"
    cards = "".join(_product_card(p, p.get("currency") or currency, style) for p in products)
    return f"""<section class="shop">
  <h3 class="shop__title"{style_attr(("font-family", style.title_font), ("color", style.title_color))}>{text(c, "title", "Shop")}</h3>
  <div class="shop__grid">{cards}</div>
</section>"""
