from typing import List, Optional, Dict, Literal
from pydantic import BaseModel, ConfigDict, Field

Category = Literal["kyoto", "fukuoka"]
CATEGORIES = ("kyoto", "fukuoka")


class _Camel(BaseModel):
    # front end sends camelCase; python side reads snake_case
    model_config = ConfigDict(populate_by_name=True)


class Highlight(_Camel):
    title: str = ""
    desc: str = ""
    img: str = ""


class ItemDetails(_Camel):
    overview: str = ""
    food: Highlight = Field(default_factory=Highlight)
    activity: Highlight = Field(default_factory=Highlight)
    must_dos: List[str] = Field(default_factory=list, alias="mustDos")


class ItemInput(_Camel):
    day: str = ""
    title: str
    time: str = ""
    description: str = ""
    image: str = ""
    cost: str = ""
    map_query: str = Field("", alias="mapQuery")
    date: Optional[str] = None  # YYYY-MM-DD
    end_date: Optional[str] = Field(None, alias="endDate")
    details: Optional[ItemDetails] = None


class ItineraryItem(ItemInput):
    id: str
    hidden_gem_id: str = Field("", alias="hiddenGemId")


class BudgetConfig(_Camel):
    days: float = Field(30, ge=0)
    accommodation: float = Field(15000, ge=0)
    food: float = Field(5000, ge=0)
    transport: float = Field(1500, ge=0)
    misc: float = Field(2000, ge=0)


class BudgetTotals(_Camel):
    daily_jpy: float = Field(alias="dailyJpy")
    daily_usd: float = Field(alias="dailyUsd")
    trip_jpy: float = Field(alias="tripJpy")
    trip_usd: float = Field(alias="tripUsd")
    rate: float


class BudgetView(BaseModel):
    config: BudgetConfig
    totals: BudgetTotals


class PackingItem(BaseModel):
    id: str
    text: str
    checked: bool = False


class PackingView(BaseModel):
    items: List[PackingItem]
    to_pack: List[PackingItem]
    packed: List[PackingItem]
    progress: int


class TextInput(BaseModel):
    text: str


class Tip(BaseModel):
    id: str
    icon: str = "pencil"
    title: str = "Note"
    text: str


class TripDates(_Camel):
    start_date: str = Field("", alias="startDate")
    end_date: str = Field("", alias="endDate")


class DayPick(BaseModel):
    day: str  # YYYY-MM-DD


class TripCountdown(BaseModel):
    status: Literal["none", "upcoming", "ongoing", "past"]
    days: int = 0
    duration: int = 0


class ChatMessage(BaseModel):
    role: Literal["user", "ai"]
    text: str


class ChatRequest(BaseModel):
    message: str


class ChatReply(BaseModel):
    reply: str
    failed: bool = False
    history: List[ChatMessage]


class SlotOut(BaseModel):
    id: str
    title: str
    time: str = ""
    row: int
    show_label: bool


class DayOut(BaseModel):
    date: str
    slots: List[Optional[SlotOut]]
    more: int = 0


class CalendarMonth(BaseModel):
    year: int
    month: int
    label: str
    leading_blanks: int
    rows: Dict[str, int]
    days: List[DayOut]
    previous: Dict[str, int]
    next: Dict[str, int]


class CityWeather(BaseModel):
    city: str
    temp: int
    condition: Literal["Clear", "Cloudy", "Rain", "Unknown"]
