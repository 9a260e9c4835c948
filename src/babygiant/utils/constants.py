"""Curve and search constants for the Baby Jubjub discrete-log solver."""

# -- Base field (BN254 scalar field) --
FIELD_MODULUS: int = (
    21888242871839275222246405745257275088548364400416034343698204186575808495617
)
FIELD_BITS: int = 256
FIELD_HEX_DIGITS: int = FIELD_BITS // 4  # 64

# -- Baby Jubjub, as emitted by the harness: a*x^2 + y^2 = 1 + d*x^2*y^2 --
BABYJUBJUB_A: int = 168700
BABYJUBJUB_D: int = 168696

# -- Prime-order subgroup generated by Base8 --
SUBGROUP_ORDER: int = (
    2736030358979909402780800718157159386076813972158567259200215660948447373041
)
GENERATOR_X: int = (
    5299619240641551281634865583518297030282874472190772894086521144482721001553
)
GENERATOR_Y: int = (
    16950150798460657717958625567821834550301663161624707787222815936182638968203
)

# -- Framing of harness coordinate strings --
HEX_PREFIX: str = "0x"
HARNESS_BYTE_ORDER: str = "little"  # Noir prints field bytes least-significant first

# -- Search --
DEFAULT_BIT_WIDTH: int = 40
MAX_BIT_WIDTH: int = 64
CANCEL_CHECK_INTERVAL: int = 1024
