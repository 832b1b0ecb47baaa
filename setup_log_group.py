"""
CloudWatch Setup Script
Creates the log group used by the CloudWatch fleet logger
"""

import os

import boto3

# Configuration
AWS_REGION = os.environ.get('AWS_REGION', 'eu-west-1')
CLOUDWATCH_LOG_GROUP = os.environ.get('CLOUDWATCH_LOG_GROUP', '/fleet-app/logs')
RETENTION_DAYS = 7


def create_cloudwatch_log_group(logs, log_group=CLOUDWATCH_LOG_GROUP, retention_days=RETENTION_DAYS):
    """Create CloudWatch log group; returns True if it exists afterwards"""
    print(f"Creating CloudWatch log group: {log_group}...")
    try:
        logs.create_log_group(logGroupName=log_group)

        logs.put_retention_policy(
            logGroupName=log_group,
            retentionInDays=retention_days
        )

        print(f"✓ CloudWatch log group created: {log_group}")
    except logs.exceptions.ResourceAlreadyExistsException:
        print(f"✓ CloudWatch log group already exists: {log_group}")
    except Exception as e:
        print(f"✗ Error creating CloudWatch log group: {e}")
        return False
    return True


def main():
    """Main function to create the logging resources"""
    print("=" * 60)
    print("CloudWatch Setup for the Fleet App")
    print("=" * 60)
    print(f"Region: {AWS_REGION}")
    print("=" * 60)

    logs = boto3.client('logs', region_name=AWS_REGION)
    ok = create_cloudwatch_log_group(logs)

    print("=" * 60)
    print("Setup complete!" if ok else "Setup failed!")
    print("=" * 60)
    return 0 if ok else 1


if __name__ == '__main__':
    raise SystemExit(main())
