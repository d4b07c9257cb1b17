# responses.py

greetings = [
    "Hey! What's on your mind?",
    "Hi! Ready to think deep?",
    "Hello! I'm your genius assistant.",
    "Yo! Let's solve something cool."
]

jokes = [
    "Why did the AI go to therapy? Too many unresolved promises.",
    "I told my code to behave, now it's unionizing.",
    "Why don't AIs play hide and seek? Because good luck hiding from `grep`!"
]

fallbacks = [
    "That's a great question. Let me think...",
    "I don't know yet, but I'm learning. Teach me?",
    "The universe is weird. Want to explore?",
    "Interesting. Tell me more."
]

# trigger phrase (lowercase) -> answer
facts = {
    # history
    "when was world war 2": "1939 – 1945.",
    "who won world war 2": "The Allies (USA, USSR, UK, etc.).",
    "when was world war 1": "1914 – 1918.",
    "who invented the internet": "Vint Cerf and Bob Kahn (TCP/IP).",
    "when was the moon landing": "July 20, 1969 – Apollo 11.",

    # science
    "how old is the earth": "4.54 billion years.",
    "speed of light": "299,792,458 m/s.",
    "what is e=mc²": "Energy = mass × (speed of light)².",
    "what is dna": "Deoxyribonucleic acid – the code of life.",
    "what is gravity": "A force pulling masses together. Curved spacetime (Einstein).",

    # tech
    "best programming language": "Python – readable and runs everywhere.",
    "what is git": "Version control. Never lose code again.",
    "what is flask": "A lightweight Python web framework.",
    "how to deploy a flask app": "Put it behind a WSGI server like gunicorn.",

    # life
    "how to make money": "Solve hard problems. Ship fast. Own equity.",
    "how to learn coding": "Build. Break. Fix. Repeat. Daily.",
    "best way to sleep": "7–9 hours. Dark room. No screens.",
    "how to be happy": "Gratitude + purpose + human connection."
}

capitals = {
    "france": "Paris",
    "japan": "Tokyo",
    "brazil": "Brasília",
    "india": "New Delhi"
}

UNKNOWN_CAPITAL = "I don't know the capital of {country}. Teach me!"

WHAT_IS_REPLY = 'Let me think: {subject} is... (add fact or say "I need to learn this")'

HOW_DOES_REPLY = "Step 1: Input. Step 2: Process. Step 3: Output. Want details?"

EXPLAIN_REPLY = "Breaking it down simply..."

TEACH_CONFIRM = "Learned: **{question}** → {answer}"

TEACH_FORMAT_HELP = "Format: teach me: question => answer"

# error payload for blank requests
EMPTY_MESSAGE = "Empty"
