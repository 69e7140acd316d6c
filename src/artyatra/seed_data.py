"""Static catalog data loaded at process start."""

from datetime import UTC, datetime

from artyatra.domain.art_styles import ArtStyle, GeoPoint
from artyatra.domain.categories import CategoryInfo

_SEEDED_AT = datetime.now(tz=UTC)

ART_STYLES: tuple[ArtStyle, ...] = (
    ArtStyle(
        id="warli-art-001",
        name="Warli Art",
        origin=GeoPoint(lat=19.0760, lng=72.8777),
        description=(
            "Ancient tribal art form using geometric patterns in white pigment "
            "on mud walls, depicting daily life and nature."
        ),
        fun_facts=(
            "Over 3000 years old",
            "Uses rice paste and natural gum",
            "Traditionally painted by women",
        ),
        cultural_significance=(
            "Sacred art form representing harmony between humans, animals, "
            "and nature in tribal communities."
        ),
        state="Maharashtra",
        image_url=None,
        created_at=_SEEDED_AT,
    ),
    ArtStyle(
        id="pochampally-ikat-001",
        name="Pochampally Ikat",
        origin=GeoPoint(lat=17.3850, lng=78.4867),
        description=(
            "Traditional tie-dye textile art creating intricate geometric "
            "patterns through resist dyeing technique."
        ),
        fun_facts=(
            "UNESCO protected craft",
            "Takes 3-4 months per saree",
            "Known as the Silk City of India",
        ),
        cultural_significance=(
            "Royal patronage art form showcasing the weaving expertise passed "
            "down through generations."
        ),
        state="Telangana",
        image_url=None,
        created_at=_SEEDED_AT,
    ),
    ArtStyle(
        id="thanjavur-painting-001",
        name="Thanjavur Painting",
        origin=GeoPoint(lat=10.7905, lng=79.1378),
        description=(
            "Classical South Indian painting style featuring rich colors, gold "
            "foil work, and religious themes."
        ),
        fun_facts=(
            "Uses 22-carat gold foil",
            "Semi-precious stones embedded",
            "Maratha period origin",
        ),
        cultural_significance=(
            "Sacred art form depicting Hindu deities, essential for temple "
            "decoration and spiritual practices."
        ),
        state="Tamil Nadu",
        image_url=None,
        created_at=_SEEDED_AT,
    ),
    ArtStyle(
        id="madhubani-painting-001",
        name="Madhubani Painting",
        origin=GeoPoint(lat=26.3598, lng=86.0661),
        description=(
            "Vibrant folk art from Bihar featuring nature and mythology themes "
            "using fingers, twigs, and matchsticks."
        ),
        fun_facts=(
            "Originally done on mud walls",
            "No blank spaces left",
            "Passed mother to daughter",
        ),
        cultural_significance=(
            "Wedding and festival art form expressing folk beliefs and "
            "celebrating life events in rural communities."
        ),
        state="Bihar",
        image_url=None,
        created_at=_SEEDED_AT,
    ),
    ArtStyle(
        id="kalamkari-001",
        name="Kalamkari",
        origin=GeoPoint(lat=15.9129, lng=79.7400),
        description=(
            "Hand-painted textile art using natural dyes and depicting "
            "mythological stories and nature motifs."
        ),
        fun_facts=("23-step process", "Uses bamboo pen", "Persian influence"),
        cultural_significance=(
            "Storytelling tradition through cloth, preserving ancient epics and "
            "connecting communities to their heritage."
        ),
        state="Andhra Pradesh",
        image_url=None,
        created_at=_SEEDED_AT,
    ),
    ArtStyle(
        id="pattachitra-001",
        name="Pattachitra",
        origin=GeoPoint(lat=19.8135, lng=85.0859),
        description=(
            "Traditional scroll painting from Odisha featuring mythological "
            "narratives with intricate details and vibrant colors."
        ),
        fun_facts=(
            "Cloth canvas preparation",
            "Natural stone colors",
            "No pencil sketches",
        ),
        cultural_significance=(
            "Temple art form narrating Jagannath legends, integral to Odishan "
            "religious and cultural identity."
        ),
        state="Odisha",
        image_url=None,
        created_at=_SEEDED_AT,
    ),
    ArtStyle(
        id="gond-art-001",
        name="Gond Art",
        origin=GeoPoint(lat=22.9734, lng=78.6569),
        description=(
            "Tribal art form using dots and lines to create intricate patterns "
            "depicting folklore and nature."
        ),
        fun_facts=(
            "Signature dot technique",
            "Natural colors from earth",
            "Dreamtime stories",
        ),
        cultural_significance=(
            "Spiritual connection to nature and ancestors, preserving tribal "
            "wisdom and environmental knowledge."
        ),
        state="Madhya Pradesh",
        image_url=None,
        created_at=_SEEDED_AT,
    ),
    ArtStyle(
        id="pichwai-painting-001",
        name="Pichwai Painting",
        origin=GeoPoint(lat=24.5854, lng=73.7125),
        description=(
            "Devotional art form depicting Lord Krishna, traditionally hung "
            "behind temple deities with seasonal themes."
        ),
        fun_facts=(
            "Nathdwara tradition",
            "Seasonal festivals depicted",
            "Intricate cloth work",
        ),
        cultural_significance=(
            "Temple worship art expressing devotion to Krishna, marking "
            "religious festivals and seasonal celebrations."
        ),
        state="Rajasthan",
        image_url=None,
        created_at=_SEEDED_AT,
    ),
)

# Short hints sent to the vision model alongside each label.
ART_STYLE_HINTS: dict[str, str] = {
    "Warli Art": "Tribal art from Maharashtra with geometric patterns",
    "Pochampally Ikat": "Tie-dye textile art from Telangana",
    "Thanjavur Painting": "Classical painting from Tamil Nadu with gold foil",
    "Madhubani Painting": "Folk art from Bihar with vibrant colors",
    "Kalamkari": "Hand-painted textile art from Andhra Pradesh",
    "Pattachitra": "Traditional painting from Odisha",
    "Gond Art": "Tribal art from Central India",
    "Pichwai Painting": "Religious art from Rajasthan",
}

CATEGORIES: tuple[CategoryInfo, ...] = (
    # Painting and scroll arts
    CategoryInfo(
        name="Cheriyal Scroll Paintings (Telangana)",
        origin_name="Cheriyal, Telangana",
        lat=18.994,
        lng=78.890,
        description=(
            "Narrative Nakashi scrolls illustrating epics and caste-based tales, "
            "traditionally used by storytellers."
        ),
        fun_facts=(
            "Traditionally painted on khadi scrolls with natural pigments.",
            "Commissioned for itinerant bards to narrate village-to-village.",
            "Bold outlines, flat fills, and expressive eyes stand out.",
        ),
    ),
    CategoryInfo(
        name="Nirmal Paintings (Telangana)",
        origin_name="Nirmal, Telangana",
        lat=19.095,
        lng=78.344,
        description=(
            "Mythological and nature themes on wood panels using bright hues "
            "and a distinct golden backdrop."
        ),
        fun_facts=(
            "Shares lineage with Nirmal toys and a similar painting tradition.",
            "Patronized historically by local courts and nobility.",
            "Natural pigments and gold tones are characteristic.",
        ),
    ),
    CategoryInfo(
        name="Kalamkari (Andhra, Machilipatnam & Srikalahasti)",
        origin_name="Srikalahasti & Machilipatnam, Andhra Pradesh",
        lat=13.752,
        lng=79.703,
        description=(
            "Hand-painted or block-printed textiles narrating epics; Srikalahasti "
            "is freehand pen-work, Machilipatnam uses blocks."
        ),
        fun_facts=(
            "'Kalam' means pen; bamboo/cotton nibs are used.",
            "Natural mordants yield indigo, madder red, and black.",
            "Temple hangings depict Ramayana/Mahabharata scenes.",
        ),
    ),
    CategoryInfo(
        name="Lepakshi Wall Paintings (Andhra)",
        origin_name="Lepakshi, Andhra Pradesh",
        lat=13.804,
        lng=77.609,
        description=(
            "Vijayanagara-era murals adorning temple ceilings and walls, famed "
            "for dynamism and color."
        ),
        fun_facts=(
            "The Veerabhadra Temple houses famous murals.",
            "Themes include Shiva-Parvati and Kiratarjuneeyam.",
            "Mineral colors on lime plasters were used.",
        ),
    ),
    CategoryInfo(
        name="Deccani Miniature Painting",
        origin_name="Hyderabad Courts (Deccan)",
        lat=17.385,
        lng=78.486,
        description=(
            "Persian-influenced miniatures with opulent palettes and lyrical "
            "compositions."
        ),
        fun_facts=(
            "Flourished under the Qutb Shahi dynasty.",
            "Lavish textiles and garden scenes are common.",
            "Distinct from Mughal miniatures in palette.",
        ),
    ),
    # Textiles and weaving
    CategoryInfo(
        name="Pochampally Ikat (Telangana)",
        origin_name="Bhoodan Pochampally, Telangana",
        lat=17.283,
        lng=78.894,
        description=(
            "Double-ikat weaving with intricate geometric motifs and vibrant "
            "contrasts."
        ),
        fun_facts=(
            "Yarns are resist-dyed before weaving.",
            "Holds a Geographical Indication (GI) tag.",
            "Many households still use traditional looms.",
        ),
    ),
    # Crafts and woodwork
    CategoryInfo(
        name="Nirmal Toys (Telangana)",
        origin_name="Nirmal, Telangana",
        lat=19.095,
        lng=78.344,
        description=(
            "Handcrafted wooden toys painted in bright colors; shares aesthetics "
            "with Nirmal painting."
        ),
        fun_facts=(
            "Uses locally sourced softwood.",
            "Themes range from animals to deities.",
            "Natural dyes and lacquer finishes.",
        ),
    ),
    CategoryInfo(
        name="Etikoppaka Wooden Doll (Andhra)",
        origin_name="Etikoppaka, Andhra Pradesh",
        lat=17.997,
        lng=83.431,
        description=(
            "Lathe-turned wooden toys finished with natural lacquer (Nakkapalli "
            "lacquerware)."
        ),
        fun_facts=(
            "Known for soft, organic forms.",
            "Craft dates back centuries along Varaha belt.",
            "GI-tagged handicraft.",
        ),
    ),
    CategoryInfo(
        name="Kondapalli Toys (Andhra)",
        origin_name="Kondapalli, Andhra Pradesh",
        lat=16.620,
        lng=80.534,
        description=(
            "Hand-carved softwood figurines and sets; bright storytelling "
            "dioramas."
        ),
        fun_facts=(
            "Made from 'Tella Poniki' softwood.",
            "Village tableaux and mythic sets are classics.",
            "Lightweight and collectible.",
        ),
    ),
    # Sculpture and stone arts
    CategoryInfo(
        name="Banjara Embroidery (Both States)",
        origin_name="Banjara/Lambadi Settlements (Deccan)",
        lat=16.750,
        lng=78.050,
        description=(
            "Mirror-work and bold embroidery by the Banjara (Lambadi) community, "
            "with vibrant geometric motifs."
        ),
        fun_facts=(
            "Heavy use of mirrors, shells, and coins.",
            "Traditional attire features dense stitches.",
            "Found across Deccan trade routes.",
        ),
    ),
    CategoryInfo(
        name="Andhra Stone Carving (Andhra)",
        origin_name="Tirupati Region, Andhra Pradesh",
        lat=13.628,
        lng=79.419,
        description=(
            "Temple sculpture traditions: pillars, icons, and reliefs with high "
            "craftsmanship."
        ),
        fun_facts=(
            "Granite and schist are commonly worked.",
            "Workshops cater to temples across the South.",
            "Motifs follow Agama/Shilpa Shastra.",
        ),
    ),
    CategoryInfo(
        name="Bidriware (Telangana)",
        origin_name="Hyderabad Market Tradition",
        lat=17.385,
        lng=78.486,
        description=(
            "Blackened metalware with silver inlay; Deccan courts popularized "
            "its patronage and trade."
        ),
        fun_facts=(
            "Alloy is darkened using special soil treatments.",
            "Floral and geometric inlay patterns are signatures.",
            "Closely tied to Deccan sultanate aesthetics.",
        ),
    ),
    # Folk and tribal arts
    CategoryInfo(
        name="Oggu Katha (Telangana)",
        origin_name="Siddipet Region, Telangana",
        lat=18.104,
        lng=78.846,
        description=(
            "Ballad performance devoted to Mallanna and other deities, music "
            "and narration combined."
        ),
        fun_facts=(
            "Troupes carry traditional instruments.",
            "Often tied to ritual and festivals.",
            "Highly dramatic costumes and delivery.",
        ),
    ),
    CategoryInfo(
        name="Burra Katha (Andhra)",
        origin_name="Coastal Andhra (Guntur Belt)",
        lat=16.306,
        lng=80.436,
        description=(
            "Narrative storytelling with a central lead and two side performers, "
            "mixing satire and lore."
        ),
        fun_facts=(
            "Named after the 'burra' instrument.",
            "Weaves social commentary with mythology.",
            "Popular at fairs and village gatherings.",
        ),
    ),
    CategoryInfo(
        name="Lambadi Dance (Both States)",
        origin_name="Nalgonda/Nizamabad Corridors",
        lat=17.056,
        lng=79.267,
        description=(
            "Embroidery and dance of the Lambadi (Banjara) community, rich with "
            "mirrors and coins."
        ),
        fun_facts=(
            "Dance has swirling skirts and jingling adornments.",
            "Embroidery motifs reflect nomadic heritage.",
            "Garments are often heirloom pieces.",
        ),
    ),
    CategoryInfo(
        name="Tholu Bommalata (Andhra & Telangana)",
        origin_name="Nimmalakunta (Anantapur), Andhra Pradesh",
        lat=14.556,
        lng=77.720,
        description=(
            "Shadow-puppet theatre using painted translucent leather to narrate "
            "epics."
        ),
        fun_facts=(
            "Articulated puppets colored with natural dyes.",
            "All-night performances during festivals.",
            "Narration, music, and light interplay create drama.",
        ),
    ),
)
