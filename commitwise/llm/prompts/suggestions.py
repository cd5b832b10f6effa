"""User prompt template for commit suggestions.

Asks for a fixed number of ranked Conventional Commits headers, each with
a short explanation, as a JSON object.
"""

USER_PROMPT_TEMPLATE_SUGGESTIONS = """Suggest commit messages for the staged changes described below.

Produce a JSON object with exactly this shape:
{{"suggestions": [{{"message": "<type>(<scope>): <description>", "explanation": "<one sentence>"}}]}}

Rules:
- Return EXACTLY {count} suggestions, best first.
- "message" must follow Conventional Commits: type(scope): description
- "type" must be one of: {types}
- Keep each message at or under {max_length} characters.
- Use the imperative mood (e.g., "add login form" not "added login form").
- Do not end a message with a period.
- Do not wrap the response in a markdown code block (no ``` fences). Output ONLY the JSON object.
- Only describe changes shown in the diffs. Use [SCOPES] for the scope when it fits.

[BRANCH]
{branch}

[RECENT_COMMITS]
{recent_commits}

[STATS]
Files changed: {files}
Additions: +{additions}
Deletions: -{deletions}

[SCOPES]
{scopes}

[FILES]
{file_sections}"""

FILE_SECTION_TEMPLATE = """--- {filename} ---
Scope: {scope}
Status: {status}
Changes: +{additions} -{deletions}
Diff:
{diff}
"""
