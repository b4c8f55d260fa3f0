"""Meeting Desk: client meeting scheduling, follow-ups and CRM sync dashboard."""
