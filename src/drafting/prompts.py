"""Prompt text for drafting conference follow-up emails."""

SYSTEM_PROMPT = (
    "You are an AI assistant specialized in analyzing legal correspondence and "
    "generating appropriate follow-up emails. Your task is to analyze an email from "
    "Bhavesh Mistry (BM) to a client and generate a draft response following specific "
    "templates and guidelines. Format your response using markdown for bold text "
    "(**bold**) and hyperlinks in the format [link text](URL)."
)

DEFAULT_MEETING_OPTIONS = (
    "Thursday, 27 March 2025 at 10:30am",
    "Thursday, 27 March 2025 at 1:30pm",
    "Thursday, 27 March 2025 at 2:30pm",
)

# Any of these in the email routes the draft to Template B
ESTATE_PLANNING_KEYWORDS = (
    "estate planning",
    "asset protection",
    "will",
    "enduring power of attorney",
    "estate plan",
    "SMSF Trust Deeds",
    "Family Trust Deeds",
)

SUBJECT_PREFIX = "Conference - "

QUESTIONNAIRE_URL = "https://mistryfallahi.com.au/client-asset-protection-enquiry/"

TEMPLATE_A = """**Private and Confidential**

Hi [client name]

Further to Bhavesh Mistry's email correspondence today, we look forward to assisting you.

**Conference**

Please note, Bhavesh Mistry will be available at the following dates and times below for a **[meeting format]** with you for further discussion:

- [date/time option 1]; or
- [date/time option 2]; or
- [date/time option 3].

We look forward to hearing from you shortly.

Please email us ensuring that you select `Reply All` to our email so our team can assist you."""

TEMPLATE_B = f"""**Private and Confidential**

Hi [client name]

Further to Bhavesh Mistry's email correspondence today, we look forward to assisting you with your estate planning.

**Conference**

To allow us to understand your intentions, Bhavesh Mistry will be available at the following dates and times below for a **[meeting format]** with you for an initial discussion of your estate planning:

- [date/time option 1]; or
- [date/time option 2]; or
- [date/time option 3].

Please kindly let us know if any of the above times are suitable and your best contact number. Alternatively, please let us know if there are any other dates and times more suitable for you.

**Questionnaire**

In preparation for our conference and to assist us in obtaining your initial information and allowing you to start considering your estate plan, please take a few minutes to complete our estate planning questionnaire at the following [link]({QUESTIONNAIRE_URL}).

We look forward to hearing from you shortly.

Please email us ensuring that you select `Reply All` to our email so our team can assist you."""


USER_PROMPT_TEMPLATE = """AI Prompt for Email Analysis and Response Generation

Input Format
You will receive:
1. Initial Email: The original email sent by BM to the client including the subject line
2. Available Meeting Times: A list of dates and times when BM is available for meetings
3. Templates: Reference email templates to follow

Here is the email to analyze:
Subject: {subject}
From: {sender}
{date_line}Body:
{body}

Available Meeting Times:
{meeting_times}

Analysis Requirements
Please analyze the initial email to identify:
1. Client Information:
- Extract all client names mentioned in the email greeting (e.g., "Hi Barry" → "Barry")
- Note if multiple clients are addressed (e.g., couples, business partners)
2. Service Type:
- Determine if the email is about estate planning or non-estate planning
- Estate planning indicators include: {estate_keywords}
- Non-estate planning might relate to: divorce, business matters, disputes, etc.
3. Meeting Format:
- Identify if the meeting is proposed as:
  • MS Teams meeting (if call then also MS Teams meeting unless noted specifically that call will be on mobile)
  • In-person meeting at the office
  • In-person meeting at another location (specify if mentioned)
- Default to "MS Teams meeting OR in-person meeting at our office" if unclear

Response Generation Guidelines
Based on your analysis:
1. Template Selection:
- Use Template B if the matter involves estate planning
- Use Template A for all other matters
2. Email Structure:
- Begin with "Private and Confidential"
- Address the client by name
- Include "Conference" section with available meeting times
- For estate planning, include "Questionnaire" section with link
- End with standard closing and "Reply All" instruction
3. Formatting Requirements:
- Maintain the exact formatting from the templates
- Present meeting times as bullet points
- Preserve all bold formatting for headings

Template Reference
Template A (Non-Estate Planning)
{template_a}

Template B (Estate Planning)
{template_b}

Output Format
Your response should include ONLY the Draft Email which is completely formatted following the appropriate template. Do not include headings like "Analysis" or "Draft Email".

Example output structure:
DRAFT EMAIL:
**Subject: {subject_prefix}[Include the complete subject here]**
[Complete formatted email]

Important Notes
• Do not include section headings like "Analysis:" or "Draft Email:" in your response.
• Do not include placeholders in the final draft email. All fields should be properly populated.
• Maintain exact formatting from templates including bold text, bullet points, and paragraph spacing.
• If anything is unclear, default to the most conservative option and note your uncertainty in the analysis.
• The email subject line MUST have "{subject_prefix_stripped}" added at the beginning, followed by the complete original subject.
• For example: "{subject_prefix}Estate Planning - Paulina and Alex Pavlova (Our Ref: 10-0204)"
• Date and time to be in this format: Thursday, 27 March 2025 at 10:30am, 1:30pm or 2:30pm.
• Use **bold** markdown formatting for headings and important text.
• Format the link in the questionnaire section as a proper markdown link [link](URL)."""
