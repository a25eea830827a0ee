"""Constants for the product catalog and site navigation."""

from enum import Enum


class Page(str, Enum):
    """Enumeration of the server-rendered site pages, in navigation order."""

    home = "home"
    features = "features"
    specs = "specs"
    contacts = "contacts"


NAV_LABELS = {
    Page.home: "Home",
    Page.features: "Features",
    Page.specs: "Specs",
    Page.contacts: "Contact",
}

# (icon, title, description)
FEATURES = (
    ("🎵", "Hi-Res Audio", "Experience studio-quality sound with high-resolution audio support"),
    ("🔇", "Active Noise Cancellation", "Block out the world with advanced ANC technology"),
    ("⚡", "40H Battery Life", "All-day listening with up to 40 hours of playtime"),
    ("🎤", "Crystal Clear Calls", "AI-powered noise reduction for perfect call quality"),
    ("☁️", "Cloud Comfort", "Premium memory foam cushions for all-day comfort"),
    ("🌈", "Spatial Audio", "Immersive 3D audio with head tracking technology"),
)

# (category, items)
SPECS = (
    ("Audio", (
        "Frequency Response: 20Hz - 20kHz",
        "Impedance: 32 Ohm",
        "Driver Size: 40mm",
        "THD: <0.1%",
    )),
    ("Battery", (
        "Playtime: 40 hours (ANC off)",
        "Playtime: 30 hours (ANC on)",
        "Charging: USB-C Fast Charge",
        "Charge Time: 2 hours (full)",
        "Quick Charge: 10 min = 5 hours",
    )),
    ("Connectivity", (
        "Bluetooth 5.3",
        "Range: 10 meters",
        "Multipoint Connection",
        "Codecs: AAC, SBC, aptX HD",
    )),
    ("Physical", (
        "Weight: 250g",
        "Foldable Design",
        "Colors: Black, Silver, Rose Gold",
        "Materials: Aluminum, Leather",
    )),
)

CONTACT_THANK_YOU = "Thank you for contacting us! We'll get back to you soon."
