from dataclasses import dataclass


@dataclass(frozen=True)
class DemoStep:
    title: str
    description: str


@dataclass(frozen=True)
class DemoExample:
    id: str
    user_question: str
    ai_response: str
    steps: tuple[DemoStep, ...]
    payload: str

    def step_line(self, index: int) -> str:
        step = self.steps[index]
        return f"{index + 1}. {step.title} {step.description}"


DEMO_EXAMPLES: list[DemoExample] = [
    DemoExample(
        id="twitter-spreadsheet",
        user_question="How do I post Tweets from a spreadsheet every hour?",
        ai_response="Here's how to automate posting tweets from a spreadsheet every hour:",
        steps=(
            DemoStep("Schedule Trigger:", "Set up a Schedule node to run every hour"),
            DemoStep("Google Sheets:", "Connect to your spreadsheet and read rows"),
            DemoStep("Twitter:", "Configure the Twitter node to post tweets"),
            DemoStep("Filter:", "Add a filter to avoid reposting the same content"),
        ),
        payload="""\
{
  "nodes": [
    {
      "parameters": {
        "rule": { "interval": [{ "field": "hours", "minuteInterval": 1 }] }
      },
      "name": "Schedule Trigger",
      "type": "n8n-nodes-base.scheduleTrigger"
    },
    {
      "parameters": {
        "operation": "read",
        "sheetName": "Tweets"
      },
      "name": "Google Sheets"
    }
    // More nodes configured for your workflow...
  ]
}""",
    ),
    DemoExample(
        id="email-leads",
        user_question="Can you create a workflow that sends personalized emails to new leads from my CRM?",
        ai_response="Here's how to set up automated personalized emails for new leads:",
        steps=(
            DemoStep("Webhook Trigger:", "Create a webhook to receive new lead notifications from your CRM"),
            DemoStep("HTTP Request:", "Fetch additional lead data from your CRM API if needed"),
            DemoStep("Function Node:", "Personalize email content based on lead information"),
            DemoStep("Email Send:", "Configure SMTP settings and send the personalized email"),
        ),
        payload="""\
{
  "nodes": [
    {
      "parameters": {
        "httpMethod": "POST",
        "path": "new-lead",
        "responseMode": "onReceived"
      },
      "name": "Webhook",
      "type": "n8n-nodes-base.webhook"
    },
    {
      "parameters": {
        "functionCode": "// Personalize email content"
      },
      "name": "Personalize Email"
    }
    // More nodes configured for your workflow...
  ]
}""",
    ),
    DemoExample(
        id="data-sync",
        user_question="How can I sync customer data between Shopify and my Airtable database?",
        ai_response="Here's a workflow to synchronize customer data between Shopify and Airtable:",
        steps=(
            DemoStep("Shopify Trigger:", "Set up a webhook for new/updated customer events"),
            DemoStep("Airtable Search:", "Check if the customer already exists in Airtable"),
            DemoStep("IF Node:", "Create conditional paths for new vs. existing customers"),
            DemoStep("Airtable Create/Update:", "Add new records or update existing ones"),
        ),
        payload="""\
{
  "nodes": [
    {
      "parameters": {
        "authentication": "oAuth2",
        "resource": "customer",
        "operation": "getAll"
      },
      "name": "Shopify",
      "type": "n8n-nodes-base.shopify"
    },
    {
      "parameters": {
        "application": "airtable",
        "operation": "upsert",
        "baseId": "appXXXXXXXXXXXXXX"
      },
      "name": "Airtable"
    }
    // More nodes configured for your workflow...
  ]
}""",
    ),
    DemoExample(
        id="support-ticket",
        user_question="I need a workflow that creates Jira tickets from customer support emails",
        ai_response="Here's how to automate creating Jira tickets from support emails:",
        steps=(
            DemoStep("IMAP Email:", "Monitor a support email inbox for new messages"),
            DemoStep("Text Analysis:", "Extract key information and categorize the issue"),
            DemoStep("Jira Create:", "Create a new ticket with appropriate priority and details"),
            DemoStep("Email Reply:", "Send an automated acknowledgment to the customer"),
        ),
        payload="""\
{
  "nodes": [
    {
      "parameters": {
        "authentication": "basicAuth",
        "mailbox": "INBOX",
        "action": "getAll"
      },
      "name": "IMAP Email",
      "type": "n8n-nodes-base.imapEmail"
    },
    {
      "parameters": {
        "authentication": "basicAuth",
        "projectKey": "SUPPORT",
        "issueTypeId": 10001
      },
      "name": "Jira",
      "type": "n8n-nodes-base.jira"
    }
    // More nodes configured for your workflow...
  ]
}""",
    ),
]
