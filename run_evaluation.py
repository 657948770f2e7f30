# run_evaluation.py
import argparse
import json
import logging
import os
import sys

# Add the project root to the Python path to ensure imports work correctly
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

from flysite.config import SiteModelConfig
from flysite.exceptions import InvalidSiteDataError, RuleEngineError
from flysite.rules import NativeRuleEngine, RemoteRuleEngine, WindObservation, evaluate_site
from flysite.site_model import Site, coincident_launches
from flysite.site_model.topology import site_launch_kind
from flysite.utils import bearing_to_compass_point

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="List flyable launches for a given wind.")
    parser.add_argument("sites_file", help="JSON file holding a list of site records")
    parser.add_argument("--wind-bearing", type=float, required=True, help="Wind direction in degrees")
    parser.add_argument("--wind-speed", type=float, required=True, help="Wind speed in m/s")
    parser.add_argument("--gust", type=float, default=None, help="Gust speed in m/s")
    parser.add_argument("--remote", action="store_true", help="Use the rule engine at FLYSITE_RULE_ENGINE_URL")
    return parser.parse_args(argv)

def load_sites(path):
    with open(path, encoding="utf-8") as f:
        records = json.load(f)
    return [Site.from_dict(record) for record in records]

def main(argv=None):
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    args = parse_args(argv)
    try:
        config = SiteModelConfig.from_env()
    except ValueError as e:
        logging.error(f"Invalid FLYSITE_ environment setting: {e}")
        return 1

    try:
        sites = load_sites(args.sites_file)
    except (OSError, json.JSONDecodeError, InvalidSiteDataError) as e:
        logging.error(f"Could not load sites from {args.sites_file}: {e}")
        return 1

    observation = WindObservation(bearing=args.wind_bearing, speed=args.wind_speed, gust=args.gust)
    try:
        engine = RemoteRuleEngine(config=config) if args.remote else NativeRuleEngine()
    except RuleEngineError as e:
        logging.error(f"Rule engine unavailable: {e}")
        return 1

    print("--- Flyable Launches ---")
    print(f"Wind: {observation.bearing:.0f}° ({bearing_to_compass_point(observation.bearing)}) at {observation.speed:.1f} m/s")
    print("-" * 40)

    for site in sites:
        if not site.is_actionable:
            continue
        try:
            if isinstance(engine, NativeRuleEngine):
                # Gust limit needs the whole observation, not just the fact
                results = [(launch, engine.evaluate_observation(launch, observation)) for launch in site.launches]
            else:
                results = evaluate_site(engine, site, observation)
        except RuleEngineError as e:
            logging.error(f"Evaluation of {site.name} failed: {e}")
            return 1
        overlaps = [flag for _, flag in coincident_launches(site, config.coincidence_tolerance_deg)]

        flyable = [(launch, decision, overlap) for (launch, decision), overlap in zip(results, overlaps) if decision.is_flyable]
        print(f"\n{site.name} [{site_launch_kind(site)}]: {len(flyable)}/{len(site.launches)} launches flyable")
        for launch, decision, overlap in flyable:
            marker = " (landing on launch)" if overlap else ""
            label = launch.location.name or launch.location.coordinate.format()
            score = decision.payload.get("score", "?")
            print(f"  > {label}{marker}: score {score}")

    print("\n--- Evaluation Complete ---")
    return 0

if __name__ == "__main__":
    sys.exit(main())
