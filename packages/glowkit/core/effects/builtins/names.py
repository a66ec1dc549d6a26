"""Builtin device effect names table.

One entry per device effect: display name, browsing category and how
the effect treats the selected colors.
"""

from glowkit.core.effects.catalog import EFFECT_REGISTRY
from glowkit.core.effects.enums import ColorBehavior
from glowkit.core.effects.models import EffectInfo


def _fx(
    effect_id: int,
    name: str,
    category: str,
    color_behavior: ColorBehavior,
    *,
    requires_2d: bool = False,
    requires_audio: bool = False,
    uses_color_layout: bool = False,
) -> EffectInfo:
    return EffectInfo(
        id=effect_id,
        name=name,
        category=category,
        color_behavior=color_behavior,
        requires_2d=requires_2d,
        requires_audio=requires_audio,
        uses_color_layout=uses_color_layout,
    )


_NAMES: tuple[EffectInfo, ...] = (
    _fx(0, "Solid", "Basic", ColorBehavior.USES_SELECTED_COLORS),
    _fx(1, "Blink", "Basic", ColorBehavior.USES_SELECTED_COLORS),
    _fx(2, "Breathe", "Basic", ColorBehavior.BLENDS_SELECTED_COLORS),
    _fx(5, "Random Colors", "Basic", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(7, "Dynamic", "Basic", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(8, "Colorloop", "Basic", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(12, "Fade", "Basic", ColorBehavior.BLENDS_SELECTED_COLORS),
    _fx(18, "Dissolve", "Basic", ColorBehavior.BLENDS_SELECTED_COLORS),
    _fx(19, "Dissolve Rnd", "Basic", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(26, "Blink Rainbow", "Basic", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(34, "Colorful", "Basic", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(35, "Traffic Light", "Basic", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(46, "Gradient", "Basic", ColorBehavior.BLENDS_SELECTED_COLORS, uses_color_layout=True),
    _fx(47, "Loading", "Basic", ColorBehavior.USES_SELECTED_COLORS),
    _fx(56, "Tri Fade", "Basic", ColorBehavior.BLENDS_SELECTED_COLORS),
    _fx(62, "Oscillate", "Basic", ColorBehavior.USES_SELECTED_COLORS),
    _fx(65, "Palette", "Basic", ColorBehavior.USES_PALETTE),
    _fx(68, "Bpm", "Basic", ColorBehavior.USES_PALETTE),
    _fx(83, "Solid Pattern", "Basic", ColorBehavior.USES_SELECTED_COLORS, uses_color_layout=True),
    _fx(84, "Solid Pattern Tri", "Basic", ColorBehavior.USES_SELECTED_COLORS, uses_color_layout=True),
    _fx(85, "Spots", "Basic", ColorBehavior.USES_SELECTED_COLORS, uses_color_layout=True),
    _fx(86, "Spots Fade", "Basic", ColorBehavior.BLENDS_SELECTED_COLORS, uses_color_layout=True),
    _fx(98, "Percent", "Basic", ColorBehavior.USES_SELECTED_COLORS),
    _fx(100, "Heartbeat", "Basic", ColorBehavior.BLENDS_SELECTED_COLORS),
    _fx(108, "Sine", "Basic", ColorBehavior.USES_PALETTE),
    _fx(113, "Washing Machine", "Basic", ColorBehavior.USES_SELECTED_COLORS),
    _fx(117, "Dynamic Smooth", "Basic", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(128, "Pixels", "Basic", ColorBehavior.USES_PALETTE),
    _fx(3, "Wipe", "Wipe", ColorBehavior.USES_SELECTED_COLORS),
    _fx(4, "Wipe Random", "Wipe", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(6, "Sweep", "Wipe", ColorBehavior.USES_SELECTED_COLORS),
    _fx(36, "Sweep Random", "Wipe", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(55, "Tri Wipe", "Wipe", ColorBehavior.USES_SELECTED_COLORS),
    _fx(13, "Theater", "Chase", ColorBehavior.USES_SELECTED_COLORS),
    _fx(14, "Theater Rainbow", "Chase", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(15, "Running", "Chase", ColorBehavior.USES_SELECTED_COLORS),
    _fx(16, "Saw", "Chase", ColorBehavior.USES_SELECTED_COLORS),
    _fx(27, "Android", "Chase", ColorBehavior.USES_SELECTED_COLORS),
    _fx(28, "Chase", "Chase", ColorBehavior.USES_SELECTED_COLORS),
    _fx(29, "Chase Random", "Chase", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(30, "Chase Rainbow", "Chase", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(31, "Chase Flash", "Chase", ColorBehavior.USES_SELECTED_COLORS),
    _fx(32, "Chase Flash Rnd", "Chase", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(37, "Chase 2", "Chase", ColorBehavior.USES_SELECTED_COLORS),
    _fx(50, "Two Dots", "Chase", ColorBehavior.USES_SELECTED_COLORS),
    _fx(52, "Running Dual", "Chase", ColorBehavior.USES_SELECTED_COLORS),
    _fx(54, "Chase 3", "Chase", ColorBehavior.USES_SELECTED_COLORS),
    _fx(64, "Juggle", "Chase", ColorBehavior.USES_PALETTE),
    _fx(78, "Railway", "Chase", ColorBehavior.USES_SELECTED_COLORS),
    _fx(92, "Sinelon", "Chase", ColorBehavior.USES_PALETTE),
    _fx(93, "Sinelon Dual", "Chase", ColorBehavior.USES_PALETTE),
    _fx(94, "Sinelon Rainbow", "Chase", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(111, "Chunchun", "Chase", ColorBehavior.USES_SELECTED_COLORS),
    _fx(10, "Scan", "Scanner", ColorBehavior.USES_SELECTED_COLORS),
    _fx(11, "Scan Dual", "Scanner", ColorBehavior.USES_SELECTED_COLORS),
    _fx(40, "Scanner", "Scanner", ColorBehavior.USES_SELECTED_COLORS),
    _fx(41, "Lighthouse", "Scanner", ColorBehavior.USES_SELECTED_COLORS),
    _fx(58, "ICU", "Scanner", ColorBehavior.USES_SELECTED_COLORS),
    _fx(60, "Scanner Dual", "Scanner", ColorBehavior.USES_SELECTED_COLORS),
    _fx(17, "Twinkle", "Sparkle", ColorBehavior.USES_SELECTED_COLORS, uses_color_layout=True),
    _fx(20, "Sparkle", "Sparkle", ColorBehavior.USES_SELECTED_COLORS, uses_color_layout=True),
    _fx(21, "Sparkle Dark", "Sparkle", ColorBehavior.USES_SELECTED_COLORS, uses_color_layout=True),
    _fx(22, "Sparkle+", "Sparkle", ColorBehavior.USES_SELECTED_COLORS, uses_color_layout=True),
    _fx(49, "Fairy", "Sparkle", ColorBehavior.USES_SELECTED_COLORS, uses_color_layout=True),
    _fx(51, "Fairytwinkle", "Sparkle", ColorBehavior.USES_SELECTED_COLORS, uses_color_layout=True),
    _fx(74, "Colortwinkles", "Sparkle", ColorBehavior.USES_PALETTE, uses_color_layout=True),
    _fx(80, "Twinklefox", "Sparkle", ColorBehavior.USES_PALETTE),
    _fx(81, "Twinklecat", "Sparkle", ColorBehavior.USES_PALETTE),
    _fx(87, "Glitter", "Sparkle", ColorBehavior.USES_SELECTED_COLORS, uses_color_layout=True),
    _fx(103, "Solid Glitter", "Sparkle", ColorBehavior.USES_SELECTED_COLORS, uses_color_layout=True),
    _fx(106, "Twinkleup", "Sparkle", ColorBehavior.USES_PALETTE),
    _fx(59, "Multi Comet", "Meteor", ColorBehavior.USES_SELECTED_COLORS),
    _fx(76, "Meteor", "Meteor", ColorBehavior.USES_SELECTED_COLORS),
    _fx(77, "Meteor Smooth", "Meteor", ColorBehavior.USES_SELECTED_COLORS),
    _fx(45, "Fire Flicker", "Fire", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(66, "Fire 2012", "Fire", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(88, "Candle", "Fire", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(102, "Candle Multi", "Fire", ColorBehavior.USES_SELECTED_COLORS),
    _fx(42, "Fireworks", "Fireworks", ColorBehavior.USES_PALETTE),
    _fx(89, "Fireworks Starburst", "Fireworks", ColorBehavior.USES_PALETTE),
    _fx(90, "Fireworks 1D", "Fireworks", ColorBehavior.USES_PALETTE),
    _fx(79, "Ripple", "Ripple", ColorBehavior.USES_PALETTE),
    _fx(99, "Ripple Rainbow", "Ripple", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(9, "Rainbow", "Rainbow", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(33, "Rainbow Runner", "Rainbow", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(63, "Pride 2015", "Rainbow", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(23, "Strobe", "Strobe", ColorBehavior.USES_SELECTED_COLORS),
    _fx(24, "Strobe Rainbow", "Strobe", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(25, "Strobe Mega", "Strobe", ColorBehavior.USES_SELECTED_COLORS),
    _fx(57, "Lightning", "Strobe", ColorBehavior.USES_SELECTED_COLORS),
    _fx(38, "Aurora", "Ambient", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(39, "Stream", "Ambient", ColorBehavior.USES_PALETTE),
    _fx(43, "Rain", "Ambient", ColorBehavior.USES_PALETTE),
    _fx(61, "Stream 2", "Ambient", ColorBehavior.USES_PALETTE),
    _fx(67, "Colorwaves", "Ambient", ColorBehavior.USES_PALETTE),
    _fx(75, "Lake", "Ambient", ColorBehavior.USES_PALETTE),
    _fx(96, "Drip", "Ambient", ColorBehavior.USES_SELECTED_COLORS),
    _fx(97, "Plasma", "Ambient", ColorBehavior.USES_PALETTE),
    _fx(101, "Pacifica", "Ambient", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(104, "Sunrise", "Ambient", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(105, "Phased", "Ambient", ColorBehavior.USES_PALETTE),
    _fx(110, "Flow", "Ambient", ColorBehavior.USES_PALETTE),
    _fx(112, "Dancing Shadows", "Ambient", ColorBehavior.USES_SELECTED_COLORS),
    _fx(115, "Blends", "Ambient", ColorBehavior.USES_PALETTE),
    _fx(116, "TV Simulator", "Ambient", ColorBehavior.GENERATES_OWN_COLORS),
    _fx(69, "Fill Noise", "Noise", ColorBehavior.USES_PALETTE),
    _fx(70, "Noise 1", "Noise", ColorBehavior.USES_PALETTE),
    _fx(71, "Noise 2", "Noise", ColorBehavior.USES_PALETTE),
    _fx(72, "Noise 3", "Noise", ColorBehavior.USES_PALETTE),
    _fx(73, "Noise 4", "Noise", ColorBehavior.USES_PALETTE),
    _fx(107, "Noise Pal", "Noise", ColorBehavior.USES_PALETTE),
    _fx(109, "Phased Noise", "Noise", ColorBehavior.USES_PALETTE),
    _fx(44, "Tetrix", "Game", ColorBehavior.USES_SELECTED_COLORS),
    _fx(91, "Bouncing Balls", "Game", ColorBehavior.USES_SELECTED_COLORS),
    _fx(95, "Popcorn", "Game", ColorBehavior.USES_SELECTED_COLORS),
    _fx(82, "Halloween Eyes", "Holiday", ColorBehavior.USES_SELECTED_COLORS),
    _fx(118, "Spaceships", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(119, "Crazy Bees", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(120, "Ghost Rider", "2D", ColorBehavior.GENERATES_OWN_COLORS, requires_2d=True),
    _fx(121, "Blobs", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(122, "Scrolling Text", "2D", ColorBehavior.USES_SELECTED_COLORS, requires_2d=True),
    _fx(123, "Drift Rose", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(124, "Distortion Waves", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(125, "Soap", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(126, "Octopus", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(127, "Waving Cell", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(146, "Noise2D", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(149, "Firenoise", "2D", ColorBehavior.GENERATES_OWN_COLORS, requires_2d=True),
    _fx(150, "Squared Swirl", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(152, "DNA", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(153, "Matrix", "2D", ColorBehavior.GENERATES_OWN_COLORS, requires_2d=True),
    _fx(154, "Metaballs", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(162, "Pulser", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(164, "Drift", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(166, "Sun Radiation", "2D", ColorBehavior.GENERATES_OWN_COLORS, requires_2d=True),
    _fx(167, "Colored Bursts", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(168, "Julia", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(172, "Game Of Life", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(173, "Tartan", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(174, "Polar Lights", "2D", ColorBehavior.GENERATES_OWN_COLORS, requires_2d=True),
    _fx(176, "Lissajous", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(177, "Frizzles", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(178, "Plasma Ball", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(179, "Flow Stripe", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(180, "Hiphotic", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(181, "Sindots", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(182, "DNA Spiral", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(183, "Black Hole", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(184, "Wavesins", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(186, "Akemi", "2D", ColorBehavior.USES_PALETTE, requires_2d=True),
    _fx(129, "Pixelwave", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(130, "Juggles", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(131, "Matripix", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(132, "Gravimeter", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(133, "Plasmoid", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(134, "Puddles", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(135, "Midnoise", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(136, "Noisemeter", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(137, "Freqwave", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(138, "Freqmatrix", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(139, "GEQ", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(140, "Waterfall", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(141, "Freqpixels", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(143, "Noisefire", "Audio", ColorBehavior.GENERATES_OWN_COLORS, requires_audio=True),
    _fx(144, "Puddlepeak", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(145, "Noisemove", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(147, "Perlin Move", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(148, "Ripple Peak", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(155, "Freqmap", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(156, "Gravcenter", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(157, "Gravcentric", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(158, "Gravfreq", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(159, "DJ Light", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(160, "Funky Plank", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(163, "Blurz", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(165, "Waverly", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(175, "Swirl", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
    _fx(185, "Rocktaves", "Audio", ColorBehavior.USES_PALETTE, requires_audio=True),
)


def _register_names() -> None:
    for info in _NAMES:
        EFFECT_REGISTRY.register_info(info)


# Auto-register on import
_register_names()
