"""Fixed Telugu texts used by the relay and the conversation client."""

from __future__ import annotations

from telugu_chat.core.models.message import Message, Role

SYSTEM_PROMPT = (
    "నీ పేరు దీప్తి. నువ్వు తెలుగులో నైజంగా మాట్లాడే సహాయక AI. "
    "వినియోగదారుడికి శ్రద్ధగా, వినయంగా, స్పష్టంగా సమాధానం ఇవ్వాలి. "
    "అవసరమైతే చిన్న చిన్న తెలుగు-ఆంగ్ల మిశ్రమ పదాలు వాడవచ్చు కానీ మొత్తం స్పందన తెలుగులోనే ఇవ్వాలి. "
    "తప్పులు ఉన్నట్లు అనిపిస్తే స్పష్టం చేయాలి. "
    "సంభాషణ సాగదీయడానికి ప్రశ్నలకు ఉత్తేజంగా స్పందించు."
)

SYSTEM_MESSAGE = Message(role=Role.SYSTEM, content=SYSTEM_PROMPT)

FALLBACK_REPLY = (
    "క్షమించండి, ప్రస్తుతం AI సేవ అందుబాటులో లేదు. "
    "కొంతసేపు తర్వాత మళ్లీ ప్రయత్నించండి లేదా అభివృద్ధిపరులు API కీను సరిచూడండి."
)

RELAY_FAILURE = (
    "దురదృష్టవశాత్తు, ప్రస్తుతం అభ్యర్థనను చేతగానాం. "
    "దయచేసి కొద్దిసేపు తర్వాత ప్రయత్నించండి."
)

# Client side
GREETING = (
    "నమస్తే! నేను మీ తెలుగులో మాట్లాడే AI సహాయకుడు. "
    "సాధారణ ప్రశ్నల నుండి కథలు, సలహాలు, అనువాదాలు, సృజనాత్మక రచనలు వరకు ఏదైనా అడగండి."
)

SERVER_NO_ANSWER = "సర్వర్ సమాధానం ఇవ్వలేకపోయింది."

UNEXPECTED_ERROR = "అనుకోని లోపం సంభవించింది. కొద్ది సేపు తర్వాత ప్రయత్నించండి."
