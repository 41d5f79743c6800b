"""Minimal demonstration of the assistant chat call."""

from blueprint_core import chat_with_ai

if __name__ == "__main__":
    question = "создай клиента Иван, оплата ежемесячно 5000"
    reply = chat_with_ai([{"role": "user", "content": question}])
    print("User:", question)
    print("Assistant:", reply["content"])
    for action in reply["actions"]:
        print("Action:", action["action"], action["data"])
