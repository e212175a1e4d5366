"""Literal markers of the text conventions requested from the grounded model.

The prompt compiler embeds these in its instructions and the parsers split on
them, so both sides always agree on the exact spelling.
"""

from smart_news.models import OutputGrammar

RESULT_MARKER = '--- RESULT ---'
SUGGESTIONS_MARKER = '--- SUGGESTIONS ---'

KEY_POINTS_MARKER = '--- KEY POINTS ---'
COMPARISON_MARKER = '--- COMPARISON ---'
POINT_MARKER = '-- Point --'
NULL_COMPARISON = 'comparison: null'

STEPS_MARKER = '--- STEPS ---'

RESULT_FIELDS = ('title', 'link', 'source', 'description', 'imageUrl')
REQUIRED_RESULT_FIELDS = ('title', 'link', 'source', 'description')


RESULTS_GRAMMAR = f"""OUTPUT FORMAT (follow exactly, do not use JSON or markdown):
For every result write a block that starts with the line "{RESULT_MARKER}" followed by these fields, one per line:
{RESULT_MARKER}
title: <title of the item>
link: <direct URL to the item>
source: <name of the website or publisher>
description: <one or two sentence description on a single line>
imageUrl: <direct URL to a thumbnail image> (optional)

After the last result write the line "{SUGGESTIONS_MARKER}" followed by one line of related search suggestions separated by commas, most relevant first:
{SUGGESTIONS_MARKER}
<suggestion>, <suggestion>, <suggestion>"""


TOPIC_REPORT_GRAMMAR = f"""OUTPUT FORMAT (follow exactly, do not use JSON or markdown):
title: <report title>
summary: <comprehensive summary, may span multiple lines>
{KEY_POINTS_MARKER}
<key point label>: <explanation on a single line>
<key point label>: <explanation on a single line>
(at most 5 key points)
{COMPARISON_MARKER}
topicA: <first topic>
topicB: <second topic>
{POINT_MARKER}
aspect: <aspect being compared>
analysisA: <analysis of the first topic for this aspect>
analysisB: <analysis of the second topic for this aspect>
{POINT_MARKER}
...repeat for each compared aspect...

If no comparison was requested, the only line after "{COMPARISON_MARKER}" must be:
{NULL_COMPARISON}"""


AGENT_REPORT_GRAMMAR = f"""OUTPUT FORMAT (follow exactly, do not use JSON or markdown):
summary: <summary of the outcome of the task>
{STEPS_MARKER}
<step title>: <what was done in this step, on a single line>
<step title>: <what was done in this step, on a single line>"""


GRAMMARS = {
	OutputGrammar.RESULTS: RESULTS_GRAMMAR,
	OutputGrammar.TOPIC_REPORT: TOPIC_REPORT_GRAMMAR,
	OutputGrammar.AGENT_REPORT: AGENT_REPORT_GRAMMAR,
}
