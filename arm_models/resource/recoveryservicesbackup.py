from datetime import datetime
from typing import Any, ClassVar, Dict, Optional, List

from attr import define, field

from arm_models.resource.base import (
    AzureModel,
    AzurePagedList,
    AzureResource,
    Discriminated,
    ExtensibleEnum,
)
from armlib.json_bender import Bender, S, Bend, ForallBend

service_name = "recoveryservicesbackup"


class BackupManagementType(ExtensibleEnum):
    INVALID = "Invalid"
    AZURE_IAAS_VM = "AzureIaasVM"
    MAB = "MAB"
    DPM = "DPM"
    AZURE_BACKUP_SERVER = "AzureBackupServer"
    AZURE_SQL = "AzureSql"
    AZURE_STORAGE = "AzureStorage"
    AZURE_WORKLOAD = "AzureWorkload"
    DEFAULT_BACKUP = "DefaultBackup"


class WorkloadType(ExtensibleEnum):
    INVALID = "Invalid"
    VM = "VM"
    FILE_FOLDER = "FileFolder"
    AZURE_SQL_DB = "AzureSqlDb"
    SQLDB = "SQLDB"
    EXCHANGE = "Exchange"
    SHAREPOINT = "Sharepoint"
    VMWARE_VM = "VMwareVM"
    SYSTEM_STATE = "SystemState"
    CLIENT = "Client"
    GENERIC_DATA_SOURCE = "GenericDataSource"
    SQL_DATA_BASE = "SQLDataBase"
    AZURE_FILE_SHARE = "AzureFileShare"
    SAP_HANA_DATABASE = "SAPHanaDatabase"
    SAP_ASE_DATABASE = "SAPAseDatabase"


class CreateMode(ExtensibleEnum):
    INVALID = "Invalid"
    DEFAULT = "Default"
    RECOVER = "Recover"


class ProtectionState(ExtensibleEnum):
    INVALID = "Invalid"
    IR_PENDING = "IRPending"
    PROTECTED = "Protected"
    PROTECTION_ERROR = "ProtectionError"
    PROTECTION_STOPPED = "ProtectionStopped"
    PROTECTION_PAUSED = "ProtectionPaused"


class HealthStatus(ExtensibleEnum):
    PASSED = "Passed"
    ACTION_REQUIRED = "ActionRequired"
    ACTION_SUGGESTED = "ActionSuggested"
    INVALID = "Invalid"


@define(slots=False, kw_only=True)
class AzureBackupResource(AzureResource):
    """
    The envelope of backup resources: location and tags are optional, the entity tag is carried as eTag.
    """

    kind: ClassVar[str] = "azure_backup_resource"
    mapping: ClassVar[Dict[str, Bender]] = AzureResource.mapping | {
        "location": S("location"),
        "tags": S("tags"),
        "e_tag": S("eTag"),
    }
    location: Optional[str] = field(default=None, metadata={"description": "Resource location."})
    tags: Dict[str, Any] = field(factory=dict, metadata={"description": "Resource tags."})
    e_tag: Optional[str] = field(default=None, metadata={"description": "Optional ETag."})


@define(slots=False, kw_only=True)
class AzureProtectedItem(AzureModel):
    """
    Base class for backup items.
    The concrete class is selected by the protectedItemType property.
    Items of an unknown type are decoded into this class.
    """

    kind: ClassVar[str] = "azure_protected_item"
    discriminator: ClassVar[Optional[str]] = "protectedItemType"
    mapping: ClassVar[Dict[str, Bender]] = {
        "protected_item_type": S("protectedItemType"),
        "backup_management_type": S("backupManagementType"),
        "workload_type": S("workloadType"),
        "container_name": S("containerName"),
        "source_resource_id": S("sourceResourceId"),
        "policy_id": S("policyId"),
        "last_recovery_point": S("lastRecoveryPoint"),
        "backup_set_name": S("backupSetName"),
        "create_mode": S("createMode"),
        "deferred_delete_time_in_utc": S("deferredDeleteTimeInUTC"),
        "is_scheduled_for_deferred_delete": S("isScheduledForDeferredDelete"),
        "deferred_delete_time_remaining": S("deferredDeleteTimeRemaining"),
        "is_deferred_delete_schedule_upcoming": S("isDeferredDeleteScheduleUpcoming"),
        "is_rehydrate": S("isRehydrate"),
        "resource_guard_operation_requests": S("resourceGuardOperationRequests"),
    }
    protected_item_type: str = field(metadata={"description": "The type of the backup item."})
    backup_management_type: Optional[BackupManagementType] = field(default=None, metadata={'description': 'Type of backup management for the backed up item.'})  # fmt: skip
    workload_type: Optional[WorkloadType] = field(default=None, metadata={'description': 'Type of workload this item represents.'})  # fmt: skip
    container_name: Optional[str] = field(default=None, metadata={'description': 'Unique name of container'})  # fmt: skip
    source_resource_id: Optional[str] = field(default=None, metadata={'description': 'ARM ID of the resource to be backed up.'})  # fmt: skip
    policy_id: Optional[str] = field(default=None, metadata={'description': 'ID of the backup policy with which this item is backed up.'})  # fmt: skip
    last_recovery_point: Optional[datetime] = field(default=None, metadata={'description': 'Timestamp when the last (latest) backup copy was created for this backup item.'})  # fmt: skip
    backup_set_name: Optional[str] = field(default=None, metadata={'description': 'Name of the backup set the backup item belongs to'})  # fmt: skip
    create_mode: Optional[CreateMode] = field(default=None, metadata={'description': 'Create mode to indicate recovery of existing soft deleted data source or creation of new data source.'})  # fmt: skip
    deferred_delete_time_in_utc: Optional[datetime] = field(default=None, metadata={'description': 'Time for deferred deletion in UTC'})  # fmt: skip
    is_scheduled_for_deferred_delete: Optional[bool] = field(default=None, metadata={'description': 'Flag to identify whether the DS is scheduled for deferred delete'})  # fmt: skip
    deferred_delete_time_remaining: Optional[str] = field(default=None, metadata={'description': 'Time remaining before the DS marked for deferred delete is permanently deleted'})  # fmt: skip
    is_deferred_delete_schedule_upcoming: Optional[bool] = field(default=None, metadata={'description': 'Flag to identify whether the deferred deleted DS is to be purged soon'})  # fmt: skip
    is_rehydrate: Optional[bool] = field(default=None, metadata={'description': 'Flag to identify that deferred deleted DS is to be moved into Pause state'})  # fmt: skip
    resource_guard_operation_requests: List[str] = field(factory=list, metadata={'description': 'ResourceGuardOperationRequests on which LAC check will be performed'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureResourceHealthDetails(AzureModel):
    kind: ClassVar[str] = "azure_resource_health_details"
    mapping: ClassVar[Dict[str, Bender]] = {
        "code": S("code"),
        "title": S("title"),
        "message": S("message"),
        "recommendations": S("recommendations"),
    }
    code: Optional[int] = field(default=None, metadata={"description": "Health Code"})
    title: Optional[str] = field(default=None, metadata={"description": "Health Title"})
    message: Optional[str] = field(default=None, metadata={"description": "Health Message"})
    recommendations: List[str] = field(factory=list, metadata={"description": "Health Recommended Actions"})


@define(slots=False, kw_only=True)
class AzureIaaSVMProtectedItemExtendedInfo(AzureModel):
    kind: ClassVar[str] = "azure_iaas_vm_protected_item_extended_info"
    mapping: ClassVar[Dict[str, Bender]] = {
        "oldest_recovery_point": S("oldestRecoveryPoint"),
        "recovery_point_count": S("recoveryPointCount"),
        "policy_inconsistent": S("policyInconsistent"),
    }
    oldest_recovery_point: Optional[datetime] = field(default=None, metadata={'description': 'The oldest backup copy available for this backup item.'})  # fmt: skip
    recovery_point_count: Optional[int] = field(default=None, metadata={'description': 'Number of backup copies available for this backup item.'})  # fmt: skip
    policy_inconsistent: Optional[bool] = field(default=None, metadata={'description': 'Specifies if backup policy associated with the backup item is inconsistent.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureDiskExclusionProperties(AzureModel):
    kind: ClassVar[str] = "azure_disk_exclusion_properties"
    mapping: ClassVar[Dict[str, Bender]] = {
        "disk_lun_list": S("diskLunList"),
        "is_inclusion_list": S("isInclusionList"),
    }
    disk_lun_list: List[int] = field(factory=list, metadata={'description': 'List of Disks LUN for which diskExclusion is enabled'})  # fmt: skip
    is_inclusion_list: Optional[bool] = field(default=None, metadata={'description': 'Flag to indicate whether DiskLunList is to be included/ excluded from backup.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureExtendedProperties(AzureModel):
    kind: ClassVar[str] = "azure_extended_properties"
    mapping: ClassVar[Dict[str, Bender]] = {
        "disk_exclusion_properties": S("diskExclusionProperties") >> Bend(AzureDiskExclusionProperties.mapping),
    }
    disk_exclusion_properties: Optional[AzureDiskExclusionProperties] = field(default=None, metadata={'description': 'Extended Properties for Disk Exclusion.'})  # fmt: skip


@AzureProtectedItem.register_subtype("AzureIaaSVMProtectedItem")
@define(slots=False, kw_only=True)
class AzureIaaSVMProtectedItem(AzureProtectedItem):
    kind: ClassVar[str] = "azure_iaas_vm_protected_item"
    mapping: ClassVar[Dict[str, Bender]] = AzureProtectedItem.mapping | {
        "friendly_name": S("friendlyName"),
        "virtual_machine_id": S("virtualMachineId"),
        "protection_status": S("protectionStatus"),
        "protection_state": S("protectionState"),
        "health_status": S("healthStatus"),
        "health_details": S("healthDetails") >> ForallBend(AzureResourceHealthDetails.mapping),
        "kpis_healths": S("kpisHealths"),
        "last_backup_status": S("lastBackupStatus"),
        "last_backup_time": S("lastBackupTime"),
        "protected_item_data_id": S("protectedItemDataId"),
        "extended_info": S("extendedInfo") >> Bend(AzureIaaSVMProtectedItemExtendedInfo.mapping),
        "extended_properties": S("extendedProperties") >> Bend(AzureExtendedProperties.mapping),
    }
    protected_item_type: str = field(default="AzureIaaSVMProtectedItem", metadata={'description': 'The type of the backup item.'})  # fmt: skip
    friendly_name: Optional[str] = field(default=None, metadata={'description': 'Friendly name of the VM represented by this backup item.'})  # fmt: skip
    virtual_machine_id: Optional[str] = field(default=None, metadata={'description': 'Fully qualified ARM ID of the virtual machine represented by this item.'})  # fmt: skip
    protection_status: Optional[str] = field(default=None, metadata={'description': 'Backup status of this backup item.'})  # fmt: skip
    protection_state: Optional[ProtectionState] = field(default=None, metadata={'description': 'Backup state of this backup item.'})  # fmt: skip
    health_status: Optional[HealthStatus] = field(default=None, metadata={'description': 'Health status of protected item.'})  # fmt: skip
    health_details: List[AzureResourceHealthDetails] = field(factory=list, metadata={'description': 'Health details on this backup item.'})  # fmt: skip
    kpis_healths: Optional[Any] = field(default=None, metadata={'description': 'Health details of different KPIs'})  # fmt: skip
    last_backup_status: Optional[str] = field(default=None, metadata={'description': 'Last backup operation status.'})  # fmt: skip
    last_backup_time: Optional[datetime] = field(default=None, metadata={'description': 'Timestamp of the last backup operation on this backup item.'})  # fmt: skip
    protected_item_data_id: Optional[str] = field(default=None, metadata={'description': 'Data ID of the protected item.'})  # fmt: skip
    extended_info: Optional[AzureIaaSVMProtectedItemExtendedInfo] = field(default=None, metadata={'description': 'Additional information for this backup item.'})  # fmt: skip
    extended_properties: Optional[AzureExtendedProperties] = field(default=None, metadata={'description': 'Extended Properties for Azure IaasVM Backup.'})  # fmt: skip


@AzureProtectedItem.register_subtype("Microsoft.ClassicCompute/virtualMachines")
@define(slots=False, kw_only=True)
class AzureIaaSClassicComputeVMProtectedItem(AzureIaaSVMProtectedItem):
    kind: ClassVar[str] = "azure_iaas_classic_compute_vm_protected_item"
    protected_item_type: str = field(default="Microsoft.ClassicCompute/virtualMachines", metadata={'description': 'The type of the backup item.'})  # fmt: skip


@AzureProtectedItem.register_subtype("Microsoft.Compute/virtualMachines")
@define(slots=False, kw_only=True)
class AzureIaaSComputeVMProtectedItem(AzureIaaSVMProtectedItem):
    kind: ClassVar[str] = "azure_iaas_compute_vm_protected_item"
    protected_item_type: str = field(default="Microsoft.Compute/virtualMachines", metadata={'description': 'The type of the backup item.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureFileshareProtectedItemExtendedInfo(AzureModel):
    kind: ClassVar[str] = "azure_fileshare_protected_item_extended_info"
    mapping: ClassVar[Dict[str, Bender]] = {
        "oldest_recovery_point": S("oldestRecoveryPoint"),
        "recovery_point_count": S("recoveryPointCount"),
        "policy_state": S("policyState"),
        "resource_state": S("resourceState"),
        "resource_state_sync_time": S("resourceStateSyncTime"),
    }
    oldest_recovery_point: Optional[datetime] = field(default=None, metadata={'description': 'The oldest backup copy available for this item in the service.'})  # fmt: skip
    recovery_point_count: Optional[int] = field(default=None, metadata={'description': 'Number of available backup copies associated with this backup item.'})  # fmt: skip
    policy_state: Optional[str] = field(default=None, metadata={'description': 'Indicates consistency of policy object and policy applied to this backup item.'})  # fmt: skip
    resource_state: Optional[str] = field(default=None, metadata={'description': 'Indicates the state of this resource. Possible values are from enum ResourceState {Invalid, Active, SoftDeleted, Deleted}'})  # fmt: skip
    resource_state_sync_time: Optional[datetime] = field(default=None, metadata={'description': 'The resource state sync time for this backup item.'})  # fmt: skip


@AzureProtectedItem.register_subtype("AzureFileShareProtectedItem")
@define(slots=False, kw_only=True)
class AzureFileshareProtectedItem(AzureProtectedItem):
    kind: ClassVar[str] = "azure_fileshare_protected_item"
    mapping: ClassVar[Dict[str, Bender]] = AzureProtectedItem.mapping | {
        "friendly_name": S("friendlyName"),
        "protection_status": S("protectionStatus"),
        "protection_state": S("protectionState"),
        "health_status": S("healthStatus"),
        "last_backup_status": S("lastBackupStatus"),
        "last_backup_time": S("lastBackupTime"),
        "kpis_healths": S("kpisHealths"),
        "extended_info": S("extendedInfo") >> Bend(AzureFileshareProtectedItemExtendedInfo.mapping),
    }
    protected_item_type: str = field(default="AzureFileShareProtectedItem", metadata={'description': 'The type of the backup item.'})  # fmt: skip
    friendly_name: Optional[str] = field(default=None, metadata={'description': 'Friendly name of the fileshare represented by this backup item.'})  # fmt: skip
    protection_status: Optional[str] = field(default=None, metadata={'description': 'Backup status of this backup item.'})  # fmt: skip
    protection_state: Optional[ProtectionState] = field(default=None, metadata={'description': 'Backup state of this backup item.'})  # fmt: skip
    health_status: Optional[HealthStatus] = field(default=None, metadata={'description': 'Health status of the backup item, evaluated based on last backup operation status.'})  # fmt: skip
    last_backup_status: Optional[str] = field(default=None, metadata={'description': 'Last backup operation status. Possible values: Healthy, Unhealthy.'})  # fmt: skip
    last_backup_time: Optional[datetime] = field(default=None, metadata={'description': 'Timestamp of the last backup operation on this backup item.'})  # fmt: skip
    kpis_healths: Optional[Any] = field(default=None, metadata={'description': 'Health details of different KPIs'})  # fmt: skip
    extended_info: Optional[AzureFileshareProtectedItemExtendedInfo] = field(default=None, metadata={'description': 'Additional information with this backup item.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureSqlProtectedItemExtendedInfo(AzureModel):
    kind: ClassVar[str] = "azure_sql_protected_item_extended_info"
    mapping: ClassVar[Dict[str, Bender]] = {
        "oldest_recovery_point": S("oldestRecoveryPoint"),
        "recovery_point_count": S("recoveryPointCount"),
        "policy_state": S("policyState"),
    }
    oldest_recovery_point: Optional[datetime] = field(default=None, metadata={'description': 'The oldest backup copy available for this item in the service.'})  # fmt: skip
    recovery_point_count: Optional[int] = field(default=None, metadata={'description': 'Number of available backup copies associated with this backup item.'})  # fmt: skip
    policy_state: Optional[str] = field(default=None, metadata={'description': 'State of the backup policy associated with this backup item.'})  # fmt: skip


@AzureProtectedItem.register_subtype("Microsoft.Sql/servers/databases")
@define(slots=False, kw_only=True)
class AzureSqlProtectedItem(AzureProtectedItem):
    kind: ClassVar[str] = "azure_sql_protected_item"
    mapping: ClassVar[Dict[str, Bender]] = AzureProtectedItem.mapping | {
        "protected_item_data_id": S("protectedItemDataId"),
        "protection_state": S("protectionState"),
        "extended_info": S("extendedInfo") >> Bend(AzureSqlProtectedItemExtendedInfo.mapping),
    }
    protected_item_type: str = field(default="Microsoft.Sql/servers/databases", metadata={'description': 'The type of the backup item.'})  # fmt: skip
    protected_item_data_id: Optional[str] = field(default=None, metadata={'description': 'Internal ID of a backup item. Used by Azure SQL Backup engine to contact Recovery Services.'})  # fmt: skip
    protection_state: Optional[ProtectionState] = field(default=None, metadata={'description': 'Backup state of the backed up item.'})  # fmt: skip
    extended_info: Optional[AzureSqlProtectedItemExtendedInfo] = field(default=None, metadata={'description': 'Additional information for this backup item.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureProtectedItemResource(AzureBackupResource):
    kind: ClassVar[str] = "azure_protected_item_resource"
    mapping: ClassVar[Dict[str, Bender]] = AzureBackupResource.mapping | {
        "properties": S("properties") >> Discriminated(AzureProtectedItem),
    }
    properties: Optional[AzureProtectedItem] = field(default=None, metadata={'description': 'ProtectedItemResource properties'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureProtectedItemResourceList(AzurePagedList):
    kind: ClassVar[str] = "azure_protected_item_resource_list"
    mapping: ClassVar[Dict[str, Bender]] = AzurePagedList.mapping | {
        "value": S("value") >> ForallBend(AzureProtectedItemResource.mapping),
    }
    value: List[AzureProtectedItemResource] = field(factory=list, metadata={'description': 'List of resources.'})  # fmt: skip
