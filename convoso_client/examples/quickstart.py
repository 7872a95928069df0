# convoso_client/examples/quickstart.py
# Reads CONVOSO_API_KEY (and optional CONVOSO_* overrides) from the environment or .env
import asyncio

from convoso_client import ClientSettings, ConvosoApiError, ConvosoClient, configure_logging, models as M


async def main() -> None:
    settings = ClientSettings()
    configure_logging(settings.log_level)

    async with ConvosoClient.from_env(settings) as cli:
        # 1) agents in a couple of campaigns (lists become "3471,104")
        agents = await cli.agent_monitor.search(campaign_id=[3471, 104], filter_by_skill_options=["CA", "TX"])
        print("Agents:", agents)

        # 2) leads, paged; limit is clamped to the endpoint ceiling
        leads = await cli.leads.search(list_id=123, offset=0, limit=5000)
        if isinstance(leads, M.Failure):
            print("Lead search failed:", leads.code, leads.error.text if leads.error else leads.text)
        else:
            print("Leads:", leads)

        # 3) user activity
        print("Activity:", await cli.user_activity.search())

        # 4) errors after retries surface as ConvosoApiError
        try:
            await cli.campaigns.get(123)
        except ConvosoApiError as exc:
            print("Campaign lookup failed:", exc.status_code, exc.code, exc.message)


if __name__ == "__main__":
    asyncio.run(main())
