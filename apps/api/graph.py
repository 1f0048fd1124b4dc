import logging
from typing import Dict, List

from langchain_core.messages import AIMessage, HumanMessage, SystemMessage
from langgraph.graph import StateGraph, START, END
from pydantic import BaseModel

from . import config
from .models.schemas import ChatMessage, ItineraryItem

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "You are a helpful, polite, and knowledgeable Japan travel guide helper for a tourist "
    "visiting Kyoto and Fukuoka. Your answers should be concise (under 100 words where "
    "possible), practical, and culturally accurate. If asked for translations, provide the "
    "Japanese characters (Kanji/Kana) and the Romaji (pronunciation). Format with bolding "
    "for key terms."
)

APOLOGY = (
    "Sumimasen! I'm having trouble connecting to the spirit world (API error). "
    "Please check your API key."
)

# how many past turns go back to the model
HISTORY_TURNS = 10


class ChatUnavailableError(RuntimeError):
    """No chat model is configured."""


class ChatState(BaseModel):
    message: str
    history: List[ChatMessage] = []
    itinerary: Dict[str, List[ItineraryItem]] = {}
    context: str = ""
    reply: str = ""
    failed: bool = False
    notes: List[str] = []


def _llm():
    from langchain_groq import ChatGroq
    return ChatGroq(model=config.CHAT_MODEL, api_key=config.GROQ_API_KEY)


def _summary(itinerary: Dict[str, List[ItineraryItem]]) -> str:
    lines = []
    for category, items in itinerary.items():
        if not items:
            continue
        lines.append(f"{category.title()}:")
        for item in items:
            when = item.date or f"day {item.day}"
            if item.date and item.end_date:
                when = f"{item.date} to {item.end_date}"
            lines.append(f"- {when}: {item.title}" + (f" ({item.time})" if item.time else ""))
    return "\n".join(lines)


# Nodes
def build_context(state: ChatState) -> ChatState:
    state.context = _summary(state.itinerary)
    state.notes.append(f"context lines: {len(state.context.splitlines())}")
    return state


def respond(state: ChatState) -> ChatState:
    system = SYSTEM_INSTRUCTION
    if state.context:
        system += "\n\nThe traveller's current itinerary:\n" + state.context
    messages = [SystemMessage(content=system)]
    for m in state.history[-HISTORY_TURNS:]:
        messages.append(HumanMessage(content=m.text) if m.role == "user" else AIMessage(content=m.text))
    messages.append(HumanMessage(content=state.message))

    try:
        res = _llm().invoke(messages)
        text = res.content if isinstance(res.content, str) else str(res.content)
        state.reply = text.strip() or "I couldn't generate a response at this time."
    except Exception as e:
        logger.error("chat model failed: %s - %s", type(e).__name__, e)
        state.notes.append(f"model failed: {e}")
        state.reply = APOLOGY
        state.failed = True
    return state


graph = StateGraph(ChatState)
graph.add_node("context", build_context)
graph.add_node("respond", respond)
graph.add_edge(START, "context")
graph.add_edge("context", "respond")
graph.add_edge("respond", END)

chat_graph = graph.compile()


def run_chat(message: str, history: List[ChatMessage], itinerary: Dict[str, List[ItineraryItem]]) -> ChatState:
    if not config.GROQ_API_KEY:
        raise ChatUnavailableError("GROQ_API_KEY is not set")
    result = chat_graph.invoke(ChatState(message=message, history=history, itinerary=itinerary))
    # invoke hands back a dict of channel values for pydantic states
    if isinstance(result, ChatState):
        return result
    return ChatState(**result)
