# Localisation de la boutique (ar / fr / nl)
from __future__ import annotations

from logging_config import logger

LANGUAGES = {"ar": "العربية", "fr": "Français", "nl": "Nederlands"}

TEXTS = {
    "ar": {
        # Navigation
        "nav.home": "الرئيسية",
        "nav.catalog": "الكتالوج",
        "nav.contact": "تواصلي معنا",
        "nav.robes": "روبات",
        "nav.jelbabs": "جلابيات",
        "nav.complets": "كومبليات",
        # Accueil
        "hero.label": "مجموعة 2026",
        "hero.title": "أناقتكِ تبدأ من هنا",
        "hero.subtitle": "اكتشفي تشكيلتنا الجديدة من الملابس النسائية الراقية",
        "hero.cta": "تصفحي الكتالوج",
        "sections.label": "اكتشفي",
        "sections.title": "أقسامنا",
        "sections.robes": "روبات",
        "sections.jelbabs": "جلابيات",
        "sections.complets": "كومبليات",
        "sections.robes.desc": "روبات أنيقة بتصاميم عصرية",
        "sections.jelbabs.desc": "جلابيات مطرزة بلمسة تقليدية",
        "sections.complets.desc": "كومبليات فاخرة لإطلالة مميزة",
        "featured.label": "مختارات",
        "featured.title": "منتجات مميزة",
        # Produit
        "product.size": "المقاس",
        "product.order": "اطلبي عبر واتساب",
        "product.price": "درهم",
        "product.added": "تمت الإضافة!",
        "product.addToCart": "أضيفي إلى السلة",
        "product.notFound": "المنتج غير موجود",
        "product.soldOut": "نفذت الكمية",
        # Catalogue
        "catalog.label": "تشكيلتنا",
        "catalog.title": "الكتالوج",
        "catalog.all": "الكل",
        "catalog.filter": "تصفية حسب القسم",
        # Contact
        "contact.title": "تواصلي معنا",
        "contact.phone": "الهاتف",
        "contact.whatsapp": "واتساب",
        "contact.instagram": "إنستغرام",
        "contact.form.name": "الاسم",
        "contact.form.email": "البريد الإلكتروني",
        "contact.form.message": "الرسالة",
        "contact.form.send": "إرسال",
        "contact.form.success": "تم إرسال رسالتك بنجاح!",
        # Panier
        "cart.title": "سلة المشتريات",
        "cart.empty": "سلتك فارغة",
        "cart.total": "المجموع",
        "cart.clear": "تفريغ السلة",
        # Pied de page
        "footer.rights": "جميع الحقوق محفوظة",
        "footer.quicklinks": "روابط سريعة",
        "footer.contact": "تواصلي معنا",
        "notfound.title": "الصفحة غير موجودة",
        "notfound.message": "عذراً، الصفحة التي تبحثين عنها غير موجودة",
        "notfound.back": "العودة للرئيسية",
        # Commande WhatsApp
        "whatsapp.message": "مرحباً، أريد طلب:",
        "order.cart_line": "• {name} - المقاس: {size} - الكمية: {quantity} - {amount} درهم",
        "order.single_line": "• {name} - المقاس: {size} - الثمن: {amount} درهم",
        "order.total_line": "المجموع: {amount} درهم",
    },
    "fr": {
        # Navigation
        "nav.home": "Accueil",
        "nav.catalog": "Catalogue",
        "nav.contact": "Contact",
        "nav.robes": "Robes",
        "nav.jelbabs": "Jelbabs",
        "nav.complets": "Complets",
        # Accueil
        "hero.label": "Collection 2026",
        "hero.title": "Votre élégance commence ici",
        "hero.subtitle": "Découvrez notre nouvelle collection de vêtements féminins raffinés",
        "hero.cta": "Parcourir le catalogue",
        "sections.label": "Découvrir",
        "sections.title": "Nos Catégories",
        "sections.robes": "Robes",
        "sections.jelbabs": "Jelbabs",
        "sections.complets": "Complets",
        "sections.robes.desc": "Robes élégantes aux designs modernes",
        "sections.jelbabs.desc": "Jelbabs brodés avec une touche traditionnelle",
        "sections.complets.desc": "Complets luxueux pour un look unique",
        "featured.label": "Sélection",
        "featured.title": "Produits Vedettes",
        # Produit
        "product.size": "Taille",
        "product.order": "Commander via WhatsApp",
        "product.price": "DH",
        "product.added": "Ajouté !",
        "product.addToCart": "Ajouter au panier",
        "product.notFound": "Produit introuvable",
        "product.soldOut": "Épuisé",
        # Catalogue
        "catalog.label": "Collection",
        "catalog.title": "Catalogue",
        "catalog.all": "Tous",
        "catalog.filter": "Filtrer par catégorie",
        # Contact
        "contact.title": "Contactez-nous",
        "contact.phone": "Téléphone",
        "contact.whatsapp": "WhatsApp",
        "contact.instagram": "Instagram",
        "contact.form.name": "Nom",
        "contact.form.email": "Email",
        "contact.form.message": "Message",
        "contact.form.send": "Envoyer",
        "contact.form.success": "Votre message a été envoyé avec succès !",
        # Panier
        "cart.title": "Panier",
        "cart.empty": "Votre panier est vide",
        "cart.total": "Total",
        "cart.clear": "Vider le panier",
        # Pied de page
        "footer.rights": "Tous droits réservés",
        "footer.quicklinks": "Liens rapides",
        "footer.contact": "Contact",
        "notfound.title": "Page introuvable",
        "notfound.message": "Désolé, la page que vous recherchez n'existe pas",
        "notfound.back": "Retour à l'accueil",
        # Commande WhatsApp
        "whatsapp.message": "Bonjour, je souhaite commander:",
        "order.cart_line": "• {name} - Taille: {size} - Qté: {quantity} - {amount} DH",
        "order.single_line": "• {name} - Taille: {size} - Prix: {amount} DH",
        "order.total_line": "Total: {amount} DH",
    },
    "nl": {
        # Navigation
        "nav.home": "Home",
        "nav.catalog": "Catalogus",
        "nav.contact": "Contact",
        "nav.robes": "Jurken",
        "nav.jelbabs": "Jelbabs",
        "nav.complets": "Complets",
        # Accueil
        "hero.label": "Collectie 2026",
        "hero.title": "Uw elegantie begint hier",
        "hero.subtitle": "Ontdek onze nieuwe collectie verfijnde dameskleding",
        "hero.cta": "Bekijk de catalogus",
        "sections.label": "Ontdek",
        "sections.title": "Onze Categorieën",
        "sections.robes": "Jurken",
        "sections.jelbabs": "Jelbabs",
        "sections.complets": "Complets",
        "sections.robes.desc": "Elegante jurken met moderne designs",
        "sections.jelbabs.desc": "Geborduurde jelbabs met een traditionele toets",
        "sections.complets.desc": "Luxueuze complets voor een unieke look",
        "featured.label": "Selectie",
        "featured.title": "Uitgelichte Producten",
        # Produit
        "product.size": "Maat",
        "product.order": "Bestel via WhatsApp",
        "product.price": "DH",
        "product.added": "Toegevoegd!",
        "product.addToCart": "Toevoegen aan winkelwagen",
        "product.notFound": "Product niet gevonden",
        "product.soldOut": "Uitverkocht",
        # Catalogue
        "catalog.label": "Collectie",
        "catalog.title": "Catalogus",
        "catalog.all": "Alles",
        "catalog.filter": "Filteren op categorie",
        # Contact
        "contact.title": "Neem contact op",
        "contact.phone": "Telefoon",
        "contact.whatsapp": "WhatsApp",
        "contact.instagram": "Instagram",
        "contact.form.name": "Naam",
        "contact.form.email": "E-mail",
        "contact.form.message": "Bericht",
        "contact.form.send": "Verzenden",
        "contact.form.success": "Uw bericht is succesvol verzonden!",
        # Panier
        "cart.title": "Winkelwagen",
        "cart.empty": "Uw winkelwagen is leeg",
        "cart.total": "Totaal",
        "cart.clear": "Winkelwagen legen",
        # Pied de page
        "footer.rights": "Alle rechten voorbehouden",
        "footer.quicklinks": "Snelle links",
        "footer.contact": "Contact",
        "notfound.title": "Pagina niet gevonden",
        "notfound.message": "Sorry, de pagina die u zoekt bestaat niet",
        "notfound.back": "Terug naar home",
        # Commande WhatsApp
        "whatsapp.message": "Hallo, ik wil graag bestellen:",
        "order.cart_line": "• {name} - Maat: {size} - Aantal: {quantity} - {amount} DH",
        "order.single_line": "• {name} - Maat: {size} - Prijs: {amount} DH",
        "order.total_line": "Total: {amount} DH",
    },
}


def get_text(lang: str, key: str, **kwargs: object) -> str:
    """Texte dans la langue demandée, avec formatage.

    Args:
        lang: Code de langue ('ar', 'fr' ou 'nl')
        key: Clé du texte dans TEXTS
        **kwargs: Paramètres de formatage

    Returns:
        Texte formaté, ou la clé elle-même si le texte est introuvable
    """
    texts = TEXTS.get(lang, TEXTS["fr"])
    text = texts.get(key, key)

    # Texte absent : on essaie le français
    if text == key and lang != "fr":
        text = TEXTS["fr"].get(key, key)

    if kwargs and text != key:
        try:
            return text.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.warning(f"Format error in get_text: {e}, key={key}, lang={lang}")
            return text

    return text


def get_language_name(lang: str) -> str:
    """Nom affiché de la langue."""
    return LANGUAGES.get(lang, LANGUAGES["fr"])
