from dataclasses import dataclass

CANNED_RESPONSES: tuple[str, ...] = (
    "I can help you create a workflow for that. Here's how you can approach it:\n\n"
    "1. First, you'll need to set up a trigger for your automation\n"
    "2. Then, connect to the relevant services\n"
    "3. Process the data using n8n's built-in functions\n"
    "4. Finally, set up the desired output action",
    "That's an interesting automation idea. Let me walk you through the steps:\n\n"
    "1. Start by choosing the right trigger event\n"
    "2. Connect to your data source\n"
    "3. Add transformation steps as needed\n"
    "4. Configure the final action to complete your workflow",
    "I'd be happy to help with that automation. Here's a step-by-step approach:\n\n"
    "1. Set up your initial trigger condition\n"
    "2. Connect to the necessary APIs or services\n"
    "3. Add logic nodes to handle your specific requirements\n"
    "4. Configure the output actions to complete your workflow",
    "Here's how you can build that automation in n8n:\n\n"
    "1. Begin with the appropriate trigger node\n"
    "2. Add HTTP Request nodes to connect to external services\n"
    "3. Use Function nodes to transform your data\n"
    "4. Finish with action nodes to execute the final steps",
)


@dataclass(frozen=True)
class Prompt:
    icon: str
    text: str


# Shown on the empty chat screen; clicking one fills the input box.
EXAMPLE_PROMPTS: list[Prompt] = [
    Prompt(icon="sparkles", text="How do I create a workflow that posts to Twitter when I publish a blog?"),
    Prompt(icon="zap", text="Create an automation that sends welcome emails to new customers"),
    Prompt(icon="database", text="How can I sync data between Airtable and Google Sheets automatically?"),
    Prompt(icon="globe", text="Build a workflow that monitors website uptime and sends alerts"),
]

ACTION_PILLS: list[Prompt] = [
    Prompt(icon="mail", text="Email Scraper"),
    Prompt(icon="users", text="Generate Leads from Clients"),
    Prompt(icon="youtube", text="YouTube Automation"),
    Prompt(icon="dollar-sign", text="A Million Dollar Automation Idea"),
    Prompt(icon="brain", text="Explain Concept"),
    Prompt(icon="sparkles", text="Workflow Ideas"),
]
