"""02 — Manual tool loop.

Drive the weather tools by hand instead of through ChatSession, printing each
tool call and a short preview of its result.
"""

from tenki_chat import Client, Message, Settings, ToolRegistry, ToolResult, WeatherPlugin

settings = Settings.from_env()
client = Client(settings)
registry = WeatherPlugin().register(ToolRegistry())

messages: list[Message | ToolResult] = [Message(role="user", content="那覇の天気は？")]
response = client.chat(messages, tools=registry.definitions())

while response.tool_calls:
    messages.append(response.to_message())
    for tc in response.tool_calls:
        result = registry.execute(tc)
        print(f"[Tool: {tc.name}({tc.arguments}) → {result[:60]}]")
        messages.append(ToolResult(tool_call_id=tc.id, name=tc.name, content=result))
    response = client.chat(messages, tools=registry.definitions())

print("\nAssistant:", response.text)
