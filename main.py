import argparse
import json
import logging
import sys
import uuid

from core.config_loader import load_config
from core.matching import rank_workers_for_job
from core.matching.dto import InvalidMatchInputError, job_for_matching, worker_for_matching
from core.matching.policy import apply_result_policy
from database.database import get_engine, get_session_factory, init_db
from database.uow import marketplace_uow

logger = logging.getLogger(__name__)


def configure_logging(config) -> None:
    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.INFO),
        format=config.logging.format
    )


def cmd_init_db(config, args) -> int:
    init_db(get_engine(config.database.url))
    return 0


def cmd_rank(config, args) -> int:
    """Print the read-only candidate ranking for a job as JSON."""
    policy = config.matching.recommendation_policy
    if args.top_k:
        policy = policy.model_copy(update={'top_k': args.top_k})

    with marketplace_uow(get_session_factory(config.database.url)) as repo:
        job = repo.jobs.get_by_id(args.job_id)
        if job is None:
            logger.error(f"Job not found: {args.job_id}")
            return 1

        try:
            job_input = job_for_matching(job)
        except InvalidMatchInputError as e:
            logger.error(f"Job {job.id} cannot be matched: {e}")
            return 1

        workers = []
        for worker in repo.workers.list_all():
            try:
                workers.append(worker_for_matching(worker))
            except InvalidMatchInputError as e:
                logger.warning(f"Skipping worker {worker.id}: {e}")

    scores = apply_result_policy(rank_workers_for_job(job_input, workers), policy)
    rows = [
        {
            'worker_id': str(s.worker_id),
            'worker_name': s.worker_name,
            'final_score': s.final_score,
            'skill_overlap': s.skill_overlap,
            'rate_fit': s.rate_fit,
            'distance_score': s.distance_score,
            'availability_coverage': s.availability_coverage,
            'overlap_hours': s.overlap_hours,
            'distance_km': s.distance_km,
        }
        for s in scores
    ]
    json.dump(rows, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="GigMatch worker-to-job matching")
    parser.add_argument('--config', default='config.yaml', help="Path to config.yaml")

    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('init-db', help="Create database tables")

    rank = subparsers.add_parser('rank', help="Rank candidate workers for a job")
    rank.add_argument('job_id', type=uuid.UUID, help="Job posting ID")
    rank.add_argument('--top-k', type=int, default=None, help="Override the result limit")

    return parser


COMMANDS = {
    'init-db': cmd_init_db,
    'rank': cmd_rank,
}


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    configure_logging(config)
    return COMMANDS[args.command](config, args)


if __name__ == "__main__":
    sys.exit(main())
