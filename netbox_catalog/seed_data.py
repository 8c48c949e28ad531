"""Curated sample tools used to seed the catalog.

``updated_at`` values are relative to the seeding time so the "newest" sort
has something to work with on a fresh install.
"""

from datetime import datetime, timedelta, timezone

from netbox_catalog.categories import ToolCategory
from netbox_catalog.schemas import ToolCreate

_UNSPLASH = "https://images.unsplash.com/{photo}?ixlib=rb-4.0.3&auto=format&fit=crop&w=600&h=300&q=80"


def _use_cases(*entries: tuple[str, str, str]) -> list[dict]:
    colors = ("primary", "secondary", "accent")
    return [
        {"title": title, "description": description, "icon": icon, "iconColor": color}
        for (title, description, icon), color in zip(entries, colors)
    ]


SAMPLE_TOOLS: list[dict] = [
    {
        "name": "NeuralPainter",
        "description": "Advanced image generation AI capable of creating photorealistic images from text descriptions with exceptional detail.",
        "category": ToolCategory.IMAGE,
        "photo": "photo-1620712943543-bcc4688e7485",
        "rating": 490,
        "tags": ["image generation", "photorealistic", "text-to-image"],
        "features": [
            "Photorealistic image generation from text prompts",
            "Style transfer capabilities with over 50 artistic styles",
            "Image editing and enhancement tools",
            "Batch processing for multiple images",
            "API access for integration with other applications",
        ],
        "use_cases": _use_cases(
            ("Art & Design", "Create concept art, illustrations, and design assets quickly.", "palette"),
            ("Marketing", "Generate unique visuals for campaigns and social media.", "ad"),
            ("Game Development", "Quickly prototype environments, characters, and assets.", "gamepad"),
        ),
        "is_featured": True,
        "is_popular": False,
        "website_url": "https://neuralpainter.ai",
        "icon": "paint-brush",
        "icon_color": "purple",
        "days_ago": 2,
    },
    {
        "name": "LinguaGenius",
        "description": "State-of-the-art language model that can write essays, stories, code, and more with human-like understanding.",
        "category": ToolCategory.TEXT,
        "photo": "photo-1655720837653-b49ce1e24169",
        "rating": 480,
        "tags": ["text generation", "language model", "writing assistant"],
        "features": [
            "Human-like text generation for essays, stories, and more",
            "Code generation and explanation across multiple languages",
            "Context-aware responses and continuations",
            "Multilingual support for over 50 languages",
            "Customizable tone and style settings",
        ],
        "use_cases": _use_cases(
            ("Content Creation", "Generate articles, stories, and marketing copy.", "file-alt"),
            ("Education", "Create learning materials and explanations.", "graduation-cap"),
            ("Programming", "Get help with coding tasks and debugging.", "code"),
        ),
        "is_featured": True,
        "is_popular": False,
        "website_url": "https://linguagenius.ai",
        "icon": "brain",
        "icon_color": "blue",
        "days_ago": 5,
    },
    {
        "name": "SonicSynth",
        "description": "Voice cloning and audio generation tool that creates natural-sounding speech and can mimic any voice with just seconds of sample audio.",
        "category": ToolCategory.AUDIO,
        "photo": "photo-1563089145-599997674d42",
        "rating": 470,
        "tags": ["audio generation", "voice cloning", "text-to-speech"],
        "features": [
            "Voice cloning with minimal sample audio",
            "Natural-sounding text-to-speech conversion",
            "Emotional tone and inflection control",
            "Background music and sound effect generation",
            "Real-time voice transformation",
        ],
        "use_cases": _use_cases(
            ("Content Creation", "Create voiceovers for videos and podcasts.", "microphone"),
            ("Accessibility", "Generate audio versions of written content.", "universal-access"),
            ("Entertainment", "Produce custom audio for games and apps.", "headphones"),
        ),
        "is_featured": True,
        "is_popular": False,
        "website_url": "https://sonicsynth.ai",
        "icon": "music",
        "icon_color": "green",
        "days_ago": 3,
    },
    {
        "name": "CodeAssist",
        "description": "AI that writes, explains, and optimizes code across 20+ programming languages.",
        "category": ToolCategory.CODE,
        "photo": "photo-1555066931-4365d14bab8c",
        "rating": 475,
        "tags": ["code generation", "programming", "developer tools"],
        "features": [
            "Code generation from natural language descriptions",
            "Bug detection and fixing",
            "Code explanation and documentation",
            "Support for 20+ programming languages",
            "Integration with popular IDEs",
        ],
        "use_cases": _use_cases(
            ("Software Development", "Accelerate coding with AI assistance.", "code"),
            ("Learning", "Understand complex code through explanations.", "graduation-cap"),
            ("Optimization", "Improve code performance and readability.", "tachometer-alt"),
        ),
        "is_featured": False,
        "is_popular": True,
        "website_url": "https://codeassist.dev",
        "icon": "code",
        "icon_color": "blue",
        "days_ago": 1,
    },
    {
        "name": "VideoGenius",
        "description": "Create professional videos from text prompts, including animation and special effects.",
        "category": ToolCategory.VIDEO,
        "photo": "photo-1626379953822-baec19c3accd",
        "rating": 460,
        "tags": ["video generation", "animation", "special effects"],
        "features": [
            "Text-to-video generation",
            "Animated character creation",
            "Special effects and transitions",
            "Custom scene composition",
            "Video editing and enhancement",
        ],
        "use_cases": _use_cases(
            ("Marketing", "Create engaging ads and promotional content.", "ad"),
            ("Education", "Produce educational videos and tutorials.", "chalkboard-teacher"),
            ("Entertainment", "Generate animated stories and content.", "film"),
        ),
        "is_featured": False,
        "is_popular": True,
        "website_url": "https://videogenius.ai",
        "icon": "video",
        "icon_color": "purple",
        "days_ago": 4,
    },
    {
        "name": "DataSense",
        "description": "Automated data analysis and visualization tool powered by machine learning.",
        "category": ToolCategory.DATA,
        "photo": "photo-1551288049-bebda4e38f71",
        "rating": 470,
        "tags": ["data analysis", "visualization", "business intelligence"],
        "features": [
            "Automated pattern detection in data",
            "Interactive visualization generation",
            "Predictive analytics and forecasting",
            "Natural language querying for data",
            "Automated report generation",
        ],
        "use_cases": _use_cases(
            ("Business Analytics", "Extract actionable insights from business data.", "chart-line"),
            ("Research", "Analyze and visualize research findings.", "flask"),
            ("Finance", "Model and predict financial trends.", "dollar-sign"),
        ),
        "is_featured": False,
        "is_popular": True,
        "website_url": "https://datasense.ai",
        "icon": "chart-line",
        "icon_color": "green",
        "days_ago": 7,
    },
    {
        "name": "TranslatePro",
        "description": "Advanced neural translation system supporting over 100 languages with context awareness.",
        "category": ToolCategory.TEXT,
        "photo": "photo-1508780709619-79562169bc64",
        "rating": 465,
        "tags": ["translation", "language", "localization"],
        "features": [
            "Neural machine translation for 100+ languages",
            "Context-aware translation for improved accuracy",
            "Dialect and slang understanding",
            "Technical and specialized terminology support",
            "Real-time document translation",
        ],
        "use_cases": _use_cases(
            ("Business", "Localize content for global markets.", "globe"),
            ("Travel", "Overcome language barriers while traveling.", "plane"),
            ("Education", "Access educational content in any language.", "book"),
        ),
        "is_featured": False,
        "is_popular": True,
        "website_url": "https://translatepro.ai",
        "icon": "language",
        "icon_color": "yellow",
        "days_ago": 10,
    },
    {
        "name": "ChatGenius",
        "description": "Advanced conversational AI that can handle complex dialogues, answer questions, provide recommendations, and more.",
        "category": ToolCategory.TEXT,
        "photo": "photo-1531746790731-6c087fecd65a",
        "rating": 480,
        "tags": ["conversation", "customer support", "chatbot"],
        "features": [
            "Human-like conversational abilities",
            "Knowledge base integration",
            "Multi-turn dialogue management",
            "Personality customization",
            "Sentiment analysis and emotional intelligence",
        ],
        "use_cases": _use_cases(
            ("Customer Support", "Provide 24/7 assistance to customers.", "headset"),
            ("Virtual Assistant", "Create personal AI assistants with personality.", "robot"),
            ("Education", "Build interactive tutoring and learning companions.", "graduation-cap"),
        ),
        "is_featured": False,
        "is_popular": False,
        "website_url": "https://chatgenius.ai",
        "icon": "comments",
        "icon_color": "blue",
        "days_ago": 2,
    },
    {
        "name": "AudioCraft",
        "description": "Create custom music, sound effects, and ambient audio using text prompts. Perfect for creators and developers.",
        "category": ToolCategory.AUDIO,
        "photo": "photo-1516280440614-37939bbacd81",
        "rating": 470,
        "tags": ["audio generation", "music", "sound effects"],
        "features": [
            "Text-to-music generation",
            "Custom sound effect creation",
            "Ambient soundscape design",
            "Audio style transfer",
            "Loop creation and mixing",
        ],
        "use_cases": _use_cases(
            ("Music Production", "Generate musical elements and ideas.", "music"),
            ("Game Development", "Create audio assets for games and apps.", "gamepad"),
            ("Content Creation", "Add custom audio to videos and podcasts.", "podcast"),
        ),
        "is_featured": False,
        "is_popular": False,
        "website_url": "https://audiocraft.ai",
        "icon": "music",
        "icon_color": "green",
        "days_ago": 7,
    },
    {
        "name": "SketchMind",
        "description": "Turn rough sketches into polished, professional artwork with AI enhancement and style transfer capabilities.",
        "category": ToolCategory.IMAGE,
        "photo": "photo-1457305237443-44c3d5a30b89",
        "rating": 490,
        "tags": ["sketch enhancement", "illustration", "style transfer"],
        "features": [
            "Sketch-to-image conversion",
            "Multiple artistic style transfers",
            "Resolution enhancement",
            "Digital painting automation",
            "Drawing assistance and guidance",
        ],
        "use_cases": _use_cases(
            ("Illustration", "Transform rough concepts into finished artwork.", "pencil-alt"),
            ("UI/UX Design", "Convert wireframes into polished mockups.", "desktop"),
            ("Education", "Teach art techniques through AI demonstration.", "paintbrush"),
        ),
        "is_featured": False,
        "is_popular": False,
        "website_url": "https://sketchmind.art",
        "icon": "pencil-alt",
        "icon_color": "purple",
        "days_ago": 3,
    },
    {
        "name": "VideoMaster",
        "description": "Automated video editing, enhancement, and generation based on text input. Create professional videos in minutes.",
        "category": ToolCategory.VIDEO,
        "photo": "photo-1536240478700-b869070f9279",
        "rating": 460,
        "tags": ["video editing", "enhancement", "auto-captioning"],
        "features": [
            "Automated video editing from raw footage",
            "Color grading and enhancement",
            "Audio cleaning and normalization",
            "Auto-captioning and subtitling",
            "Content-aware editing decisions",
        ],
        "use_cases": _use_cases(
            ("Content Creation", "Streamline video production workflow.", "video"),
            ("Marketing", "Create professional marketing videos quickly.", "ad"),
            ("Social Media", "Generate platform-optimized video content.", "share"),
        ),
        "is_featured": False,
        "is_popular": False,
        "website_url": "https://videomaster.pro",
        "icon": "film",
        "icon_color": "red",
        "days_ago": 5,
    },
    {
        "name": "DevGenius",
        "description": "AI-powered coding assistant that generates code, fixes bugs, and provides explanations across multiple programming languages.",
        "category": ToolCategory.CODE,
        "photo": "photo-1542831371-29b0f74f9713",
        "rating": 480,
        "tags": ["code generation", "debugging", "documentation"],
        "features": [
            "Code generation from natural language",
            "Bug detection and fixing",
            "Code explanation and documentation",
            "Refactoring suggestions",
            "Performance optimization",
        ],
        "use_cases": _use_cases(
            ("Software Development", "Speed up development with AI assistance.", "code"),
            ("Education", "Learn programming with interactive guidance.", "graduation-cap"),
            ("Code Maintenance", "Keep codebases clean and optimized.", "tools"),
        ),
        "is_featured": False,
        "is_popular": False,
        "website_url": "https://devgenius.dev",
        "icon": "code-branch",
        "icon_color": "yellow",
        "days_ago": 1,
    },
    {
        "name": "AIAnalyst",
        "description": "Intelligent data analysis platform that extracts insights, creates visualizations, and generates reports from your data.",
        "category": ToolCategory.DATA,
        "photo": "photo-1543286386-713bdd548da4",
        "rating": 470,
        "tags": ["data analysis", "visualization", "reporting"],
        "features": [
            "Automated insight extraction",
            "Dynamic visualization generation",
            "Natural language data querying",
            "Pattern recognition and anomaly detection",
            "Automated report compilation",
        ],
        "use_cases": _use_cases(
            ("Business Intelligence", "Transform raw data into actionable insights.", "chart-pie"),
            ("Research", "Analyze complex datasets efficiently.", "flask"),
            ("Marketing", "Track and optimize campaign performance.", "bullhorn"),
        ),
        "is_featured": False,
        "is_popular": False,
        "website_url": "https://aianalyst.tech",
        "icon": "robot",
        "icon_color": "teal",
        "days_ago": 7,
    },
]


def sample_tools(now: datetime | None = None) -> list[ToolCreate]:
    """Build the seed payloads, stamping ``updated_at`` relative to ``now``."""
    now = now or datetime.now(timezone.utc)
    tools = []
    for entry in SAMPLE_TOOLS:
        data = {k: v for k, v in entry.items() if k not in ("photo", "days_ago")}
        data["image_url"] = _UNSPLASH.format(photo=entry["photo"])
        data["updated_at"] = (now - timedelta(days=entry["days_ago"])).isoformat()
        tools.append(ToolCreate.model_validate(data))
    return tools
