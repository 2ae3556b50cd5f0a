"""Polices : identifiants de thème → font-family CSS et familles Google Fonts."""
from typing import Optional

FONT_FAMILY_MAP: dict[str, str] = {
    # Google Fonts : sans-serif
    "inter": "'Inter', sans-serif",
    "poppins": "'Poppins', sans-serif",
    "montserrat": "'Montserrat', sans-serif",
    "raleway": "'Raleway', sans-serif",
    "opensans": "'Open Sans', sans-serif",
    "roboto": "'Roboto', sans-serif",
    "nunito": "'Nunito', sans-serif",
    "ubuntu": "'Ubuntu', sans-serif",
    "outfit": "'Outfit', sans-serif",
    "workSans": "'Work Sans', sans-serif",
    "dmSans": "'DM Sans', sans-serif",
    "spacegrotesk": "'Space Grotesk', sans-serif",
    "manrope": "'Manrope', sans-serif",
    "plusjakarta": "'Plus Jakarta Sans', sans-serif",
    "bevietnampro": "'Be Vietnam Pro', sans-serif",
    "sora": "'Sora', sans-serif",
    # Google Fonts : serif
    "playfair": "'Playfair Display', serif",
    "lora": "'Lora', serif",
    "merriweather": "'Merriweather', serif",
    # Google Fonts : mono
    "sourcecodepro": "'Source Code Pro', monospace",
    # Polices système
    "arial": "Arial, 'Helvetica Neue', Helvetica, sans-serif",
    "helvetica": "'Helvetica Neue', Helvetica, Arial, sans-serif",
    "calibri": "Calibri, Candara, Segoe, 'Segoe UI', Optima, Arial, sans-serif",
    "verdana": "Verdana, Geneva, sans-serif",
    "tahoma": "Tahoma, Geneva, Verdana, sans-serif",
    "trebuchet": "'Trebuchet MS', 'Lucida Grande', 'Lucida Sans Unicode', 'Lucida Sans', sans-serif",
    "timesnewroman": "'Times New Roman', Times, serif",
    "georgia": "Georgia, Times, 'Times New Roman', serif",
    "garamond": "Garamond, Baskerville, 'Baskerville Old Face', 'Hoefler Text', 'Times New Roman', serif",
    "comicsans": "'Comic Sans MS', 'Comic Sans', cursive",
    "couriernew": "'Courier New', Courier, monospace",
}

# Les polices système n'ont pas besoin d'être chargées
GOOGLE_FONTS: dict[str, str] = {
    "inter": "Inter:wght@400;500;600;700;800",
    "poppins": "Poppins:wght@400;500;600;700;800",
    "playfair": "Playfair+Display:wght@400;700;900",
    "montserrat": "Montserrat:wght@400;500;600;700;800",
    "raleway": "Raleway:wght@300;400;500;600;700",
    "lora": "Lora:wght@400;500;600;700",
    "opensans": "Open+Sans:wght@400;500;600;700;800",
    "roboto": "Roboto:wght@300;400;500;700;900",
    "nunito": "Nunito:wght@400;500;600;700;800",
    "ubuntu": "Ubuntu:wght@300;400;500;700",
    "outfit": "Outfit:wght@400;500;600;700;800",
    "workSans": "Work+Sans:wght@400;500;600;700;800",
    "dmSans": "DM+Sans:wght@400;500;700",
    "spacegrotesk": "Space+Grotesk:wght@400;500;600;700",
    "manrope": "Manrope:wght@400;500;600;700;800",
    "plusjakarta": "Plus+Jakarta+Sans:wght@400;500;600;700;800",
    "bevietnampro": "Be+Vietnam+Pro:wght@400;500;600;700",
    "sora": "Sora:wght@400;500;600;700;800",
    "merriweather": "Merriweather:wght@300;400;700;900",
    "sourcecodepro": "Source+Code+Pro:wght@400;500;600;700",
}

DEFAULT_FONT = "inter"


def font_family(font_id: Optional[str], fallback: str = DEFAULT_FONT) -> str:
    """
    Identifiant de police → font-family CSS.
    Une chaîne CSS déjà formée (ancien format) est retournée telle quelle.
    """
    if not font_id:
        return FONT_FAMILY_MAP.get(fallback, "'Inter', sans-serif")
    return FONT_FAMILY_MAP.get(font_id, font_id)


def google_font_url(font_id: str) -> Optional[str]:
    family = GOOGLE_FONTS.get(font_id)
    if not family:
        return None
    return f"https://fonts.googleapis.com/css2?family={family}&display=swap"
