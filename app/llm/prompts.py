"""
Prompt builders for interview question generation and resume parsing.

The question prompts ask the model for a single JSON object with exactly two
keys, ``description`` and ``questions`` (a list of ``{"question": ...}``
objects). The resume prompt asks for a JSON array of two ``{title, skills}`` jobs.
"""

SYSTEM_PROMPT = (
    "You are an expert interviewer specialized in designing interview questions to help hiring "
    "managers find candidates with strong technical expertise and project experience. "
    "You always respond with valid JSON format only."
)

BEHAVIORAL_SYSTEM_PROMPT = (
    "You are an expert behavioral interviewer specialized in designing STAR method questions to help "
    "hiring managers assess candidates' past experiences, competencies, and behavioral patterns. "
    "You always respond with valid JSON format only."
)

_OUTPUT_CONTRACT = """IMPORTANT: You must respond with ONLY a valid JSON object containing exactly these two keys: 'questions' and 'description'. No additional text, explanations, or formatting."""


def generate_questions_prompt(name: str, objective: str, number: int, context: str) -> str:
    return f"""Generate interview questions based on the following requirements:

Interview Title: {name}
Interview Objective: {objective}
Number of questions to be generated: {number}

Guidelines for question creation:
- Focus on evaluating technical knowledge and project experience
- Assess problem-solving skills through practical examples
- Include questions about how candidates tackled challenges in previous projects
- Address soft skills (communication, teamwork, adaptability) with less emphasis than technical skills
- Maintain a professional yet approachable tone
- Create concise, open-ended questions (30 words or less each)
- Encourage detailed responses that demonstrate expertise

Context for question generation:
{context}

Requirements for output:
1. Generate a 50-word or less second-person description for the 'description' field
   - Do not use the exact objective in the description
   - Make it clear and understandable for the interview respondent
   - Explain what the interview content will cover

2. Create exactly {number} questions in the 'questions' field as an array of objects
   - Each object should have a 'question' key with the question text

{_OUTPUT_CONTRACT}

Example format:
{{
  "description": "This interview focuses on your technical expertise and project experience. You'll discuss problem-solving approaches, past challenges, and demonstrate your knowledge through practical examples.",
  "questions": [
    {{"question": "Describe a challenging technical problem you solved in a recent project."}},
    {{"question": "How do you approach debugging complex issues in your code?"}}
  ]
}}"""


def generate_behavioral_questions_prompt(name: str, objective: str, number: int, context: str) -> str:
    return f"""Generate behavioral interview questions based on the following requirements:

Interview Title: {name}
Interview Objective: {objective}
Number of questions to be generated: {number}

BEHAVIORAL INTERVIEW GUIDELINES:
- All questions must follow the STAR method framework (Situation, Task, Action, Result)
- Focus on past experiences and specific examples rather than hypothetical scenarios
- Questions should start with phrases like "Tell me about a time when...", "Describe a situation where...", "Give me an example of..."
- Balance questions across different behavioral competency areas
- Make questions relevant to the role and experience level specified

COMPETENCY AREAS TO COVER:
- Leadership and influence
- Problem-solving and decision-making
- Communication and collaboration
- Adaptability and learning agility
- Conflict resolution and negotiation
- Time management and prioritization
- Initiative and ownership
- Handling pressure and stress management

EXPERIENCE LEVEL CONSIDERATIONS:
- Entry level: school projects, internships, part-time work, volunteering
- Mid level: professional experience, project leadership, team collaboration
- Senior level: strategic decisions, organizational impact, mentoring

QUESTION QUALITY REQUIREMENTS:
- Each question should be concise and clear (under 40 words)
- Avoid leading questions or those with obvious "right" answers
- Ensure questions are open-ended and encourage storytelling

Context for question generation:
{context}

Requirements for output:
1. Generate a 50-word or less second-person description for the 'description' field
   - Explain that this is a behavioral interview focusing on past experiences
   - Mention the STAR method framework

2. Create exactly {number} behavioral questions in the 'questions' field as an array of objects
   - Each object should have a 'question' key with the behavioral question text

{_OUTPUT_CONTRACT}

Example format:
{{
  "description": "This behavioral interview focuses on your past experiences and how you've handled various workplace situations. Please use the STAR method (Situation, Task, Action, Result) when responding.",
  "questions": [
    {{"question": "Tell me about a time when you had to lead a team through a challenging project."}},
    {{"question": "Describe a situation where you had to adapt quickly to unexpected changes."}}
  ]
}}"""


RESUME_PARSER_SYSTEM_PROMPT = (
    "You are a professional resume parser specializing in technical skill extraction. "
    "You always respond with a valid JSON array only."
)


def extract_resume_jobs_prompt(extracted_text: str) -> str:
    return f"""Carefully analyze the entire resume text and extract TWO distinct job titles with their unique sets of technical skills.
Output a JSON array containing objects with keys "title" and "skills".

For example:
[
  {{
    "title": "Frontend Developer",
    "skills": ["React", "TypeScript", "CSS", "Tailwind CSS", "Redux", "Jest"]
  }},
  {{
    "title": "DevOps Engineer",
    "skills": ["Docker", "Kubernetes", "AWS", "CI/CD", "Terraform", "Linux"]
  }}
]

CRITICAL REQUIREMENTS:
1. Extract exactly TWO DIFFERENT job titles that represent distinct career paths or specializations from the resume.
2. For each job title, extract 5-10 relevant technical skills that are SPECIFIC to that role.
3. The skills for each job title should be unique for that role.
4. If the resume strongly indicates only one career path, use transferable skills to create a complementary second role.
5. Read and analyze the ENTIRE resume text thoroughly before making your determination.

*** RESUME STARTS ***
{extracted_text}
*** RESUME ENDS ***"""


def build_messages(system_prompt: str, user_prompt: str) -> list:
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": user_prompt},
    ]
