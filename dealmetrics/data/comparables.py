"""Claude API client for summarizing comparable market listings.

Independent of the metrics engine: takes free-text criteria and a CSV of
listings, returns a natural-language summary.
"""

import logging

import anthropic

from dealmetrics.config import settings
from dealmetrics.models.comparables import ComparablesCriteria

logger = logging.getLogger(__name__)


def build_prompt(criteria: ComparablesCriteria) -> str:
    return f"""You are a real estate expert. Given the following property criteria and a CSV of property listings, generate a summary of comparable properties on the market.

Criteria:
Location: {criteria.location}
Radius: {criteria.radius_miles} miles
Square Footage Range: {criteria.square_footage_range}
Property Types: {criteria.property_types}

Property Listings CSV:
{criteria.listings_csv}

Summary:"""


class ComparablesSummarizer:
    """Generates comparable-property summaries with the Anthropic API."""

    async def summarize(self, criteria: ComparablesCriteria) -> str | None:
        """Return the summary text.

        Returns None if the API key is missing, the call fails, or the model
        returns no text.
        """
        api_key = settings.anthropic_api_key
        if not api_key:
            logger.debug("Anthropic API key not configured, skipping comparables summary")
            return None

        listing_rows = max(len(criteria.listings_csv.strip().splitlines()) - 1, 0)
        logger.info(
            "Summarizing %d listings within %s mi of %s",
            listing_rows, criteria.radius_miles, criteria.location,
        )

        try:
            client = anthropic.AsyncAnthropic(api_key=api_key)
            message = await client.messages.create(
                model=settings.comparables_model,
                max_tokens=settings.comparables_max_tokens,
                messages=[{"role": "user", "content": build_prompt(criteria)}],
            )
            text = message.content[0].text.strip()
        except Exception as e:
            logger.warning("Comparables summary generation failed: %s", e)
            return None

        if not text:
            logger.warning("Comparables summary came back empty")
            return None
        return text
