"""Concept dictionary: everyday words and intents mapped to icon name fragments.

A query for ``"delete"`` should surface ``Trash``, ``Dismiss`` or ``Eraser``
icons although none of those words appear in the query. Each key is a single
lowercase word; each fragment is a PascalCase word expected to occur as a
complete segment of at least one icon name. Fragments without any matching
icon are tolerated, they simply contribute nothing.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Sequence, Tuple

from .segments import contains_pascal_word

CONCEPT_MAPPING: Dict[str, List[str]] = {
    # Decoration
    "sparkle": ["Sparkle", "Star", "Wand", "Magic", "Glitter", "Shine", "Flash"],
    "magic": ["Wand", "Sparkle", "Star", "Magic"],
    "shine": ["Sparkle", "Star", "Sun", "Lightbulb", "Flash"],
    "glitter": ["Sparkle", "Star"],
    "glow": ["Sparkle", "Flash", "Lightbulb", "Star"],
    "bright": ["Sparkle", "Star", "Sun", "Lightbulb", "Brightness"],

    # Create
    "add": ["Add", "Plus", "New", "Create"],
    "create": ["Add", "New", "Document", "Compose"],
    "new": ["Add", "New", "Document", "Plus"],
    "plus": ["Add", "Plus"],
    "insert": ["Add", "Insert", "Plus"],

    # Remove
    "delete": ["Delete", "Trash", "Remove", "Dismiss", "Clear"],
    "remove": ["Delete", "Remove", "Dismiss", "Subtract", "Minus"],
    "trash": ["Delete", "Trash"],
    "clear": ["Clear", "Dismiss", "Eraser", "Backspace"],
    "erase": ["Eraser", "Clear", "Delete", "Backspace"],
    "destroy": ["Delete", "Trash", "Dismiss"],

    # Edit
    "edit": ["Edit", "Pen", "Compose", "Rename"],
    "pencil": ["Edit", "Pen", "Compose", "Rename", "Draw"],
    "modify": ["Edit", "Settings", "Options", "Wrench"],
    "write": ["Edit", "Pen", "Compose", "TextEdit"],
    "compose": ["Compose", "Edit", "Mail", "New"],
    "change": ["Edit", "ArrowSync", "Rename", "Settings"],
    "update": ["ArrowSync", "Update", "Download", "Edit"],
    "draw": ["Edit", "Pen", "Ink", "Draw", "Brush"],
    "sketch": ["Edit", "Pen", "Draw", "Ink"],

    # Transfer
    "save": ["Save", "Checkmark", "ArrowDownload", "Disk"],
    "download": ["ArrowDownload", "Download", "CloudDownload", "Save", "ArrowDown"],
    "upload": ["ArrowUpload", "Upload", "CloudUpload", "Send", "ArrowUp"],
    "export": ["ArrowExport", "Share", "Send", "Save"],
    "import": ["ArrowImport", "Folder", "Open"],

    # Clipboard
    "copy": ["Copy", "Clipboard", "Duplicate"],
    "paste": ["ClipboardPaste", "Paste", "Clipboard"],
    "cut": ["Cut", "Scissors"],
    "duplicate": ["Copy", "Duplicate", "Clone"],
    "clone": ["Copy", "Duplicate"],

    # History
    "undo": ["ArrowUndo", "Undo", "ArrowHook"],
    "redo": ["ArrowRedo", "Redo", "ArrowHook"],
    "revert": ["ArrowUndo", "Undo", "History"],
    "restore": ["ArrowUndo", "History", "Restore"],

    # Arrows
    "arrow": ["Arrow", "Chevron", "Caret", "Triangle"],
    "left": ["ArrowLeft", "ChevronLeft", "Previous", "Back"],
    "right": ["ArrowRight", "ChevronRight", "Next", "Forward"],
    "up": ["ArrowUp", "ChevronUp", "CaretUp"],
    "down": ["ArrowDown", "ChevronDown", "CaretDown"],
    "back": ["ArrowLeft", "Back", "Previous", "ChevronLeft"],
    "forward": ["ArrowRight", "Forward", "Next", "ChevronRight"],
    "next": ["ArrowRight", "ChevronRight", "Next", "Forward"],
    "previous": ["ArrowLeft", "ChevronLeft", "Previous", "Back"],
    "direction": ["Arrow", "Navigation", "Compass"],

    # Navigation
    "home": ["Home", "House"],
    "house": ["Home", "House", "Building"],
    "menu": ["Navigation", "Hamburger", "LineHorizontal", "MoreVertical", "MoreHorizontal"],
    "hamburger": ["Navigation", "LineHorizontal"],
    "sidebar": ["Panel", "Navigation", "Sidebar"],
    "panel": ["Panel", "Sidebar", "Window"],

    # Communication
    "email": ["Mail", "Envelope", "Send", "Read"],
    "mail": ["Mail", "Envelope", "Send"],
    "message": ["Chat", "Comment", "Message", "Bubble"],
    "chat": ["Chat", "Comment", "Message", "Bubble", "People"],
    "comment": ["Comment", "Chat", "Bubble"],
    "send": ["Send", "Mail", "ArrowRight", "Paper"],
    "call": ["Call", "Phone", "Video"],
    "phone": ["Call", "Phone", "Contact"],
    "video": ["Video", "Camera", "Call", "Film", "Play"],
    "talk": ["Chat", "Comment", "Mic", "Call"],
    "speak": ["Mic", "Speaker", "Chat", "Comment"],
    "conversation": ["Chat", "Comment", "Message", "Bubble"],

    # People
    "user": ["Person", "People", "Contact", "Guest", "Account"],
    "person": ["Person", "People", "Contact", "Account"],
    "people": ["People", "Person", "Group", "Team"],
    "team": ["People", "Group", "Organization"],
    "group": ["People", "Group", "Folder"],
    "profile": ["Person", "Contact", "Account", "Info"],
    "account": ["Person", "Account", "Key", "Lock"],
    "customer": ["Person", "People", "Contact"],
    "employee": ["Person", "People", "Contact", "Badge"],
    "member": ["Person", "People", "Contact"],
    "friend": ["Person", "People", "Heart"],

    # Time
    "calendar": ["Calendar", "Date", "Event", "Clock"],
    "date": ["Calendar", "Date", "Clock"],
    "time": ["Clock", "Timer", "History", "Calendar"],
    "clock": ["Clock", "Timer", "Time"],
    "schedule": ["Calendar", "Clock", "Timer", "Event"],
    "event": ["Calendar", "Event", "Star"],
    "reminder": ["Alert", "Bell", "Clock", "Calendar"],
    "appointment": ["Calendar", "Clock", "Person"],
    "meeting": ["People", "Calendar", "Video", "Call"],

    # Documents
    "file": ["Document", "File", "Page", "Text"],
    "document": ["Document", "Page", "Text", "File"],
    "folder": ["Folder", "Archive", "Directory"],
    "attachment": ["Attach", "Paperclip", "Link"],
    "link": ["Link", "Chain", "Share", "Globe"],
    "pdf": ["Document", "DocumentPdf", "File"],
    "image": ["Image", "Photo", "Picture", "Camera"],
    "photo": ["Image", "Photo", "Camera", "Picture"],
    "picture": ["Image", "Photo", "Picture"],
    "text": ["Text", "Document", "Font", "Type"],
    "page": ["Document", "Page", "File"],
    "paper": ["Document", "Page", "File"],

    # Media
    "play": ["Play", "Video", "Media", "Triangle"],
    "pause": ["Pause", "Stop"],
    "stop": ["Stop", "Pause", "Square"],
    "music": ["Music", "Note", "Speaker", "Headphones"],
    "audio": ["Speaker", "Volume", "Microphone", "Music"],
    "sound": ["Speaker", "Volume", "Music"],
    "mute": ["SpeakerMute", "MicOff", "Volume"],
    "microphone": ["Mic", "Microphone", "Record"],
    "record": ["Record", "Microphone", "Circle"],
    "volume": ["Speaker", "Volume", "Sound"],
    "speaker": ["Speaker", "Volume", "Sound"],
    "headphones": ["Headphones", "Music", "Audio"],

    # Controls
    "settings": ["Settings", "Gear", "Cog", "Options", "Wrench"],
    "options": ["Settings", "Options", "MoreVertical", "MoreHorizontal"],
    "config": ["Settings", "Gear", "Options", "Wrench"],
    "preferences": ["Settings", "Options", "Slider"],
    "filter": ["Filter", "Funnel", "Sort"],
    "sort": ["ArrowSort", "Sort", "Filter", "Reorder"],
    "search": ["Search", "Magnify", "Find", "Zoom"],
    "find": ["Search", "Find", "Magnify"],
    "zoom": ["ZoomIn", "ZoomOut", "Search", "Magnify"],
    "button": ["Button", "Square", "Click"],
    "toggle": ["Toggle", "Switch", "Slider"],
    "switch": ["Toggle", "Switch", "ArrowSwap"],
    "slider": ["Slider", "Settings", "Options"],
    "dropdown": ["ChevronDown", "CaretDown", "Dropdown"],

    # Status
    "check": ["Checkmark", "Check", "Done", "Accept"],
    "checkmark": ["Checkmark", "Done", "Accept"],
    "done": ["Checkmark", "Done", "Complete"],
    "complete": ["Checkmark", "Done", "Complete"],
    "success": ["Checkmark", "CheckCircle", "Done"],
    "error": ["Error", "Dismiss", "Warning", "XCircle"],
    "fail": ["Error", "Dismiss", "Warning"],
    "failure": ["Error", "Dismiss", "Warning"],
    "warning": ["Warning", "Alert", "Exclamation"],
    "alert": ["Alert", "Warning", "Bell", "Notification"],
    "info": ["Info", "Question", "Help"],
    "information": ["Info", "Question", "Help"],
    "help": ["Question", "Help", "Info", "Support"],
    "question": ["Question", "Help", "Info"],
    "notification": ["Alert", "Bell", "Notification", "Ring"],
    "badge": ["Badge", "Certificate", "Award", "Circle"],

    # Security
    "lock": ["Lock", "Locked", "Key", "Shield", "Secure"],
    "unlock": ["LockOpen", "Unlock", "Key"],
    "key": ["Key", "Lock", "Password"],
    "password": ["Key", "Lock", "Eye", "Password"],
    "security": ["Shield", "Lock", "Key", "Secure"],
    "shield": ["Shield", "Security", "Protected"],
    "protect": ["Shield", "Lock", "Security"],
    "safe": ["Shield", "Lock", "Security"],
    "private": ["Lock", "Eye", "Shield", "Incognito"],

    # Sync
    "cloud": ["Cloud", "Weather", "Sync"],
    "sync": ["Sync", "ArrowSync", "Refresh", "Update"],
    "refresh": ["ArrowSync", "Refresh", "Reload"],
    "reload": ["ArrowSync", "Refresh", "Reload"],
    "loading": ["Spinner", "Hourglass", "ArrowSync"],
    "wait": ["Spinner", "Hourglass", "Clock"],

    # Rating
    "favorite": ["Star", "Heart", "Bookmark", "Pin"],
    "star": ["Star", "Sparkle", "Rating"],
    "heart": ["Heart", "Like", "Love", "Favorite"],
    "like": ["ThumbLike", "Heart", "Star"],
    "love": ["Heart", "Like", "Star"],
    "dislike": ["ThumbDislike"],
    "bookmark": ["Bookmark", "Flag", "Star", "Pin"],
    "pin": ["Pin", "Bookmark", "Tack", "Location"],
    "flag": ["Flag", "Bookmark", "Alert"],
    "rating": ["Star", "ThumbLike", "Heart"],

    # Layout
    "grid": ["Grid", "Apps", "Table", "Layout"],
    "list": ["List", "TextBullet", "Queue"],
    "table": ["Table", "Grid", "Data"],
    "expand": ["ChevronDown", "Expand", "Maximize", "FullScreen"],
    "collapse": ["ChevronUp", "Collapse", "Minimize"],
    "maximize": ["Maximize", "FullScreen", "Expand"],
    "minimize": ["Minimize", "Collapse", "WindowMinimize"],
    "fullscreen": ["FullScreen", "Maximize", "Expand"],
    "layout": ["Layout", "Grid", "Column", "Row"],
    "column": ["Column", "Layout", "TextColumn"],
    "row": ["Row", "Layout", "Table"],
    "view": ["Eye", "View", "Preview", "Visibility"],
    "hide": ["EyeOff", "Hide", "Visibility"],
    "show": ["Eye", "View", "Visibility"],
    "visible": ["Eye", "View", "Visibility"],
    "invisible": ["EyeOff", "Hide"],

    # Connectivity
    "wifi": ["Wifi", "Signal", "Network"],
    "bluetooth": ["Bluetooth"],
    "network": ["Globe", "Network", "Wifi", "Signal"],
    "internet": ["Globe", "Earth", "Network", "World"],
    "globe": ["Globe", "Earth", "World", "International"],
    "web": ["Globe", "World", "Browser"],
    "online": ["Globe", "Wifi", "Signal", "Cloud"],
    "offline": ["CloudOff", "WifiOff", "Signal"],
    "connect": ["Link", "PlugConnected", "Wifi"],
    "disconnect": ["Unlink", "PlugDisconnected", "WifiOff"],

    # Devices
    "computer": ["Desktop", "Monitor", "Computer", "Laptop"],
    "laptop": ["Laptop", "Device"],
    "desktop": ["Desktop", "Monitor", "Computer"],
    "monitor": ["Desktop", "Monitor", "Screen"],
    "screen": ["Desktop", "Monitor", "Screen"],
    "smartphone": ["Phone", "Mobile", "Device"],
    "mobile": ["Phone", "Mobile", "Device"],
    "tablet": ["Tablet", "Device"],
    "printer": ["Print", "Printer"],
    "print": ["Print", "Printer", "Document"],
    "keyboard": ["Keyboard", "Type"],
    "mouse": ["Cursor", "Mouse"],

    # Commerce
    "cart": ["Cart", "Shopping", "Basket"],
    "shopping": ["Cart", "Shopping", "Bag"],
    "basket": ["Cart", "Shopping", "Basket"],
    "money": ["Money", "Currency", "Payment", "Wallet"],
    "payment": ["Payment", "CreditCard", "Money", "Wallet"],
    "credit": ["CreditCard", "Payment", "Money"],
    "wallet": ["Wallet", "Money", "Payment"],
    "dollar": ["Money", "Currency", "CurrencyDollar"],
    "bank": ["Building", "Money", "Wallet"],
    "receipt": ["Receipt", "Document", "Money"],

    # Weather
    "weather": ["Weather", "Cloud", "Sun", "Rain"],
    "sun": ["Sun", "Brightness", "Weather", "Light"],
    "sunny": ["Sun", "Brightness", "Weather"],
    "moon": ["Moon", "Dark", "Night", "Sleep"],
    "rain": ["Rain", "Weather", "Cloud", "Drop"],
    "snow": ["Snow", "Weather", "Cold"],
    "temperature": ["Temperature", "Thermometer", "Weather"],

    # Development
    "code": ["Code", "Braces", "Terminal", "Developer"],
    "developer": ["Code", "Braces", "Terminal", "Bug"],
    "terminal": ["Terminal", "Code", "Console"],
    "console": ["Terminal", "Code", "Console"],
    "bug": ["Bug", "Error", "Debug"],
    "debug": ["Bug", "Code", "Wrench"],
    "api": ["Code", "Braces", "PlugConnected"],
    "database": ["Database", "Server", "Storage"],
    "server": ["Server", "Database", "Cloud"],

    # AI
    "ai": ["Bot", "Brain", "Lightbulb", "Sparkle", "Magic", "Wand"],
    "bot": ["Bot", "Chat", "Robot"],
    "robot": ["Bot", "BotAdd", "BotSparkle"],
    "brain": ["Brain", "Lightbulb", "Book"],
    "idea": ["Lightbulb", "Brain", "Sparkle"],
    "lightbulb": ["Lightbulb", "Idea", "Tip"],
    "smart": ["Lightbulb", "Brain", "Sparkle", "Bot"],
    "intelligence": ["Brain", "Bot", "Lightbulb"],
    "machine": ["Bot", "Cog", "Settings"],
    "learning": ["Book", "Brain", "HatGraduation"],
    "wand": ["Wand", "Magic", "Sparkle"],

    # Science
    "science": ["Beaker", "MathFormula", "Brain", "Lightbulb", "Book", "CloudBeaker"],
    "lab": ["Beaker", "CloudBeaker", "BeakerSettings"],
    "laboratory": ["Beaker", "CloudBeaker", "BeakerSettings"],
    "chemistry": ["Beaker", "CloudBeaker"],
    "chemical": ["Beaker", "CloudBeaker"],
    "experiment": ["Beaker", "Lightbulb", "CloudBeaker"],
    "research": ["Beaker", "Search", "Document", "Brain", "Book", "Library"],
    "math": ["MathFormula", "Calculator", "Number", "ClipboardMathFormula"],
    "mathematics": ["MathFormula", "Calculator", "ClipboardMathFormula"],
    "formula": ["MathFormula", "ClipboardMathFormula", "MathFormatLinear"],
    "equation": ["MathFormula", "ClipboardMathFormula"],
    "beaker": ["Beaker", "CloudBeaker", "BeakerSettings", "BeakerOff"],

    # Places
    "location": ["Location", "Map", "Pin", "Navigation"],
    "map": ["Map", "Location", "Globe", "Navigation"],
    "gps": ["Location", "Navigation", "Target"],
    "navigation": ["Navigation", "Compass", "Map", "Arrow"],
    "place": ["Location", "Pin", "Map"],
    "address": ["Location", "Home", "Building"],
    "compass": ["Compass", "Navigation", "Direction"],

    # Nature
    "animal": ["Bug", "Cat", "Dog", "Fish"],
    "tree": ["TreeDeciduous", "TreeEvergreen", "Leaf"],
    "leaf": ["Leaf", "Tree", "Plant"],
    "plant": ["Plant", "Leaf", "Tree"],
    "flower": ["Flower", "Plant", "Leaf"],
    "earth": ["Globe", "Earth", "World"],
    "fire": ["Fire", "Flame", "Hot"],
    "water": ["Drop", "Water", "Rain"],

    # Food
    "food": ["Food", "Restaurant", "Bowl", "Pizza", "Apple", "Egg"],
    "fruit": ["Apple", "Food", "Leaf"],
    "apple": ["Apple", "Food"],
    "egg": ["Egg", "Food"],
    "pizza": ["Pizza", "Food"],
    "drink": ["Drink", "Coffee", "Cup", "DrinkBeer", "DrinkWine"],
    "coffee": ["Coffee", "Drink", "Cup"],
    "tea": ["Coffee", "Drink", "Cup"],
    "restaurant": ["Food", "Restaurant", "Fork"],
    "eat": ["Food", "Restaurant", "Bowl"],
    "meal": ["Food", "Restaurant", "Bowl"],
    "soup": ["Bowl", "Food", "Restaurant", "Drink"],
    "wonton": ["Bowl", "Food", "Restaurant"],
    "ramen": ["Bowl", "Food", "Restaurant"],
    "noodle": ["Bowl", "Food", "Restaurant"],
    "pasta": ["Bowl", "Food", "Restaurant"],
    "salad": ["Bowl", "Food", "Leaf"],
    "cereal": ["Bowl", "Food"],
    "rice": ["Bowl", "Food"],
    "bowl": ["Bowl", "Food"],

    # Drinks
    "beer": ["DrinkBeer", "Drink", "Cup"],
    "wine": ["DrinkWine", "Drink", "Cup"],
    "cocktail": ["DrinkMargarita", "Drink", "Cup"],
    "margarita": ["DrinkMargarita", "Drink"],
    "juice": ["Drink", "Cup", "Apple"],
    "soda": ["Drink", "Cup"],
    "beverage": ["Drink", "Coffee", "Cup", "DrinkBeer"],

    # Cooking
    "cook": ["Food", "Bowl", "Restaurant"],
    "cooking": ["Food", "Bowl", "Restaurant"],
    "chef": ["Food", "Restaurant", "Hat"],
    "kitchen": ["Food", "Restaurant", "Bowl"],
    "recipe": ["Food", "Document", "Book"],

    # Sweets
    "snack": ["Food", "Cookie", "Apple"],
    "dessert": ["Food", "Cookie", "Birthday"],
    "cake": ["Food", "Birthday"],
    "cookie": ["Cookie", "Food"],
    "candy": ["Food", "Heart"],
    "chocolate": ["Food", "Heart"],
    "icecream": ["Food", "Cone"],

    # Meals
    "breakfast": ["Food", "Egg", "Coffee", "Bowl"],
    "lunch": ["Food", "Restaurant", "Bowl"],
    "dinner": ["Food", "Restaurant", "Bowl"],
    "brunch": ["Food", "Coffee", "Egg"],

    # Transport
    "car": ["Vehicle", "Car", "Automobile"],
    "vehicle": ["Vehicle", "Car", "Truck"],
    "plane": ["Airplane", "Flight"],
    "airplane": ["Airplane", "Flight"],
    "flight": ["Airplane", "Flight"],
    "train": ["Vehicle", "Subway"],
    "bus": ["Vehicle", "Bus"],
    "bike": ["Bicycle", "Vehicle"],
    "bicycle": ["Bicycle", "Vehicle"],

    # Misc
    "tag": ["Tag", "Label", "Hashtag"],
    "label": ["Tag", "Label"],
    "hashtag": ["Hashtag", "Number", "Tag"],
    "gift": ["Gift", "Present", "Box"],
    "present": ["Gift", "Present", "Box"],
    "box": ["Box", "Package", "Archive", "Cube"],
    "package": ["Box", "Package", "Archive"],
    "cube": ["Cube", "Box", "3D"],
    "clipboard": ["Clipboard", "Paste", "Copy"],
    "window": ["Window", "App", "Square"],
    "close": ["Dismiss", "Close", "X", "Cancel"],
    "cancel": ["Dismiss", "Cancel", "X", "Close"],
    "exit": ["SignOut", "Leave", "Dismiss", "Door"],
    "logout": ["SignOut", "Leave", "Person"],
    "login": ["SignIn", "Enter", "Person"],
    "signin": ["SignIn", "Enter", "Person"],
    "signout": ["SignOut", "Leave", "Person"],
    "share": ["Share", "Send", "Forward", "ArrowExport"],
    "open": ["Open", "Launch", "ArrowTopRight", "External"],
    "external": ["Open", "Launch", "ArrowTopRight", "LinkSquare"],
    "launch": ["Open", "Launch", "Rocket"],
    "rocket": ["Rocket", "Launch", "Send"],
    "accept": ["Checkmark", "Accept", "Done"],
    "reject": ["Dismiss", "Cancel", "X"],
    "confirm": ["Checkmark", "Accept", "Done"],
    "approve": ["Checkmark", "Accept", "ThumbLike"],
    "deny": ["Dismiss", "Cancel", "ThumbDislike"],
    "attach": ["Attach", "Paperclip", "Link"],
    "detach": ["Unlink", "Dismiss"],
    "empty": ["Empty", "Box", "Folder"],
    "full": ["Full", "Battery", "Circle"],
    "half": ["Half", "Circle"],
    "crop": ["Crop", "Image", "Cut"],
    "rotate": ["Rotate", "Arrow", "Sync"],
    "flip": ["Flip", "Arrow", "Mirror"],
    "drag": ["Drag", "Move", "ReOrder"],
    "drop": ["Drop", "Drag", "Download"],
    "move": ["Move", "Drag", "Arrow"],
    "resize": ["Resize", "Expand", "Arrow"],
    "more": ["MoreHorizontal", "MoreVertical", "Menu", "Ellipsis"],
    "ellipsis": ["MoreHorizontal", "MoreVertical"],
    "dots": ["MoreHorizontal", "MoreVertical", "Ellipsis"],
    "organization": ["Organization", "Building", "People", "Team"],
    "company": ["Building", "Organization", "Briefcase"],
    "business": ["Briefcase", "Building", "Money"],
    "work": ["Briefcase", "Building", "Document"],
    "job": ["Briefcase", "Building", "Document"],
    "task": ["Task", "Checkmark", "List", "Clipboard"],
    "todo": ["Task", "Checkmark", "List", "Clipboard"],
    "checklist": ["Task", "Checkmark", "List"],
    "form": ["Form", "Document", "TextBullet"],
    "survey": ["Form", "Document", "Checkmark"],
    "vote": ["ThumbLike", "Checkmark", "Poll"],
    "poll": ["Poll", "Chart", "Data"],
    "chart": ["Chart", "Data", "Graph"],
    "graph": ["Chart", "Data", "Graph"],
    "analytics": ["Chart", "Data", "Graph"],
    "report": ["Document", "Chart", "Data"],
    "dashboard": ["Grid", "Chart", "Data"],
    "widget": ["Square", "App", "Grid"],
    "app": ["Apps", "Grid", "Square"],
    "application": ["Apps", "Grid", "Window"],
    "tool": ["Wrench", "Tool", "Settings"],
    "tools": ["Wrench", "Tool", "Toolbox"],
    "toolbox": ["Toolbox", "Wrench", "Tool"],
    "wrench": ["Wrench", "Tool", "Settings"],
    "repair": ["Wrench", "Tool", "Settings"],
    "fix": ["Wrench", "Tool", "Bug"],
    "build": ["Hammer", "Wrench", "Build"],
    "construct": ["Hammer", "Wrench", "Building"],
}


class ConceptMapping:
    """Read-only view on a concept dictionary, built once at startup."""

    def __init__(self, mapping: Mapping[str, Sequence[str]] | None = None) -> None:
        source = CONCEPT_MAPPING if mapping is None else mapping
        frozen: Dict[str, Tuple[str, ...]] = {}
        for key, fragments in source.items():
            norm = str(key).strip().lower()
            if not norm:
                continue
            cleaned = tuple(
                dict.fromkeys(str(f).strip() for f in fragments if str(f).strip())
            )
            if cleaned:
                frozen[norm] = cleaned
        self._mapping: Mapping[str, Tuple[str, ...]] = MappingProxyType(frozen)

    def __contains__(self, key: object) -> bool:
        return key in self._mapping

    def __len__(self) -> int:
        return len(self._mapping)

    def __iter__(self) -> Iterator[str]:
        return iter(self._mapping)

    def keys(self) -> List[str]:
        return list(self._mapping)

    def fragments(self, key: str) -> Tuple[str, ...]:
        """Return the fragments for ``key`` or an empty tuple."""
        return self._mapping.get(key, ())

    def unmatched_fragments(self, names: Iterable[str]) -> Dict[str, List[str]]:
        """Return fragments per key that match no name as a complete segment.

        Only a diagnostic for dictionary authors; the search itself ignores
        such fragments.
        """

        name_list = list(names)
        unmatched: Dict[str, List[str]] = {}
        known: Dict[str, bool] = {}
        for key, fragments in self._mapping.items():
            for fragment in fragments:
                if fragment not in known:
                    known[fragment] = any(contains_pascal_word(n, fragment) for n in name_list)
                if not known[fragment]:
                    unmatched.setdefault(key, []).append(fragment)
        return unmatched
